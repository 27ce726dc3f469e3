from setuptools import setup, find_packages

setup(
    name='opentrack_dsu_bridge',
    version='0.1.0',
    packages=find_packages(include=['opentrack_dsu_bridge', 'opentrack_dsu_bridge.*']),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'loop-rate-limiters',
    ],
    extras_require={
        'test': ['pytest'],
    },
)

"""
Dispatch sinks - where converted OpenTrack samples end up.

The receiver is built with exactly one sink:
    - DebugSink: prints raw absolute samples to the console
    - ForwardingSink: hands delta samples to a forwarding target, such as a
      DSU (cemuhook) motion server

A forwarding target is any object with start(), stop() and send(sample).
send() is fire-and-forget and must not block the caller for long.
"""

from ..utils.pose_utils import PoseSample


class ForwardingTarget:
    """
    Interface for objects that accept converted samples.

    Subclass it or provide the same three methods.
    """

    def start(self):
        """Begin accepting samples."""

    def stop(self):
        """Stop accepting samples and release resources."""

    def send(self, sample: PoseSample):
        raise NotImplementedError


class CallbackTarget(ForwardingTarget):
    """
    Forwarding target that calls a plain function for every sample.

    Example:
        receiver = OpenTrackReceiver(target=CallbackTarget(dsu_server.send_motion))
    """

    def __init__(self, callback, on_start=None, on_stop=None):
        self.callback = callback
        self.on_start = on_start
        self.on_stop = on_stop

    def start(self):
        if self.on_start is not None:
            self.on_start()

    def stop(self):
        if self.on_stop is not None:
            self.on_stop()

    def send(self, sample: PoseSample):
        self.callback(sample)


def format_pose(sample: PoseSample) -> str:
    return (f"Position: [{sample.x}, {sample.y}, {sample.z}], "
            f"Rotation: [{sample.yaw}°, {sample.pitch}°, {sample.roll}°]")


class DebugSink:
    """Prints every raw sample; no differencing is applied upstream."""

    wants_deltas = False

    def __init__(self, printer=print):
        """
        Args:
            printer: Function receiving each formatted line (default: print)
        """
        self.printer = printer

    def start(self):
        pass

    def stop(self):
        pass

    def emit(self, sample: PoseSample):
        self.printer(f"[OpenTrack] {format_pose(sample)}")


class ForwardingSink:
    """Hands delta samples to a forwarding target for one start/stop cycle."""

    wants_deltas = True

    def __init__(self, target):
        self.target = target
        self.active = None

    def start(self):
        self.target.start()
        self.active = self.target

    def stop(self):
        active, self.active = self.active, None
        if active is not None:
            active.stop()

    def emit(self, sample: PoseSample):
        self.active.send(sample)


def make_sink(target=None, printer=print):
    """Pick the sink for a target: None selects console debugging."""
    if target is None:
        return DebugSink(printer=printer)
    return ForwardingSink(target)

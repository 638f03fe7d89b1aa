from .classifier import ClassifierState, Mode, PendingKind, classify, finish, flush_code, split_lines, step

__all__ = [
    "classify",
    "step",
    "finish",
    "flush_code",
    "split_lines",
    "ClassifierState",
    "Mode",
    "PendingKind",
]

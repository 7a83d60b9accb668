from mcda.methods.wpm import WPMMethod

__all__ = ["WPMMethod"]

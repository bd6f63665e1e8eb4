from npuzzle.engine.keyedmap.probe import ProbeHashMap

__all__ = ["ProbeHashMap"]

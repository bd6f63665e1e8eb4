from npuzzle.engine.pqueue.heap import HeapAdaptablePriorityQueue, Locator

__all__ = ["HeapAdaptablePriorityQueue", "Locator"]

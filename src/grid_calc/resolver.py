"""
Evaluation ordering and cycle detection over a FormulaRegistry.

The traversal is a depth-first search along referenced -> dependent edges
driven by an explicit stack of frames, so graph depth is not bounded by the
interpreter's recursion limit. Addresses come out in reverse finish order,
which places every address after all the addresses it references whenever
they are not on a common cycle.
"""

import logging
from enum import Enum

from .cells import Error
from .errors import ErrorKind

logger = logging.getLogger(__name__)

IN_PROGRESS = 1
FINISHED = 2


class CyclePolicy(Enum):
    MEMBERS = "members"  # only addresses on the detected cycle
    PATH = "path"        # every address on the active traversal path


class Frame:
    __slots__ = ('address', 'dependents', 'index')

    def __init__(self, address, dependents):
        self.address = address
        self.dependents = dependents
        self.index = 0


class Resolution:
    def __init__(self, order, tainted):
        self.order = order      # Addresses in evaluation order
        self.tainted = tainted  # Insertion-ordered set of cycle-tainted addresses

    def is_tainted(self, address):
        return address in self.tainted


class DependencyResolver:
    def __init__(self, registry, policy=CyclePolicy.MEMBERS):
        self.registry = registry
        self.policy = policy

    def resolve(self, grid):
        """Orders the registry and forces cycle-tainted cells to Error.

        Args:
            grid (CellGrid): Grid that receives Error values for tainted cells

        Returns:
            Resolution: Evaluation order and the set of tainted addresses
        """
        state = {}
        finished = []
        tainted = {}

        for root in self.registry:
            if root in state:
                continue
            state[root] = IN_PROGRESS
            frames = [Frame(root, self.registry.dependents_of(root))]
            while frames:
                frame = frames[-1]
                if frame.index < len(frame.dependents):
                    dependent = frame.dependents[frame.index]
                    frame.index += 1
                    seen = state.get(dependent)
                    if seen == IN_PROGRESS:
                        for address in self._cycle(frames, dependent):
                            tainted[address] = None
                    elif seen is None:
                        state[dependent] = IN_PROGRESS
                        frames.append(Frame(dependent, self.registry.dependents_of(dependent)))
                else:
                    state[frame.address] = FINISHED
                    finished.append(frame.address)
                    frames.pop()

        for address in tainted:
            grid.set(address, Error(ErrorKind.CYCLIC_REFERENCE))
        if tainted:
            logger.info("Cyclic references: %s", ", ".join(str(a) for a in tainted))

        finished.reverse()
        return Resolution(finished, tainted)

    def _cycle(self, frames, reentered):
        path = [frame.address for frame in frames]
        if self.policy is CyclePolicy.PATH:
            return path
        return path[path.index(reentered):]

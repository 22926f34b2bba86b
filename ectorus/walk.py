#!/usr/bin/env python3

# Copyright (C) 2026 The ectorus developers
#
# This file is part of ectorus. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectorus including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Line-walk and torus-exclusion enumerator of CurveGroup points.

Starting from a seed point, the walk draws the tangent at each
discovered point and the secant through each pair of discovered points,
recording the third intersection of every such line with the cubic.
When the explicit grid is enabled, all the other lattice points
of each processed line are marked as excluded from the curve.

If the group order is known (see ectorus.counting.count_points)
the walk stops as soon as all points have been found,
and new seeds are drawn whenever the walk runs out of lines
before that.

The engine is single threaded and owns all of its state;
every bookkeeping collection only grows,
so that re-processing a line, a pair or a point is a no-op.
"""

import enum
import logging
import secrets
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Type

from ectorus.alias import INF, Integer, Point
from ectorus.counting import count_points
from ectorus.curve_group import CurveGroup
from ectorus.exceptions import ConfigurationError, NoSeedFoundError
from ectorus.grid import MAX_GRID_P, Grid
from ectorus.line import line_through, third_intersection
from ectorus.number_theory import legendre_symbol, mod_sqrt
from ectorus.utils import int_from_integer

_logger = logging.getLogger(__name__)

MAX_SEED_TRIES = 200_000


class WalkState(enum.Enum):
    SEEDING = "seeding"
    WALKING = "walking"
    COMPLETED = "completed"
    EXHAUSTED = "exhausted"
    CAPPED = "capped"


@dataclass
class WalkResult:
    p: int
    a: int
    b: int
    point_count: Optional[int]
    complete: bool
    found: List[Point]
    lines_processed: int
    # None when rebuilt from a record, which does not carry the run state
    state: Optional[WalkState] = None
    n_excluded: Optional[int] = None
    notes: List[str] = field(default_factory=list)

    @property
    def n_finite(self) -> int:
        return sum(1 for Q in self.found if Q != INF)

    def to_dict(self) -> Dict[str, Any]:
        "Return the structured record of the run."

        dict_: Dict[str, Any] = {"p": str(self.p), "A": str(self.a), "B": str(self.b)}
        if self.point_count is not None:
            dict_["pointCount"] = self.point_count
        dict_["complete"] = self.complete
        dict_["found"] = [
            {"inf": True} if Q == INF else {"x": str(Q[0]), "y": str(Q[1]), "inf": False}
            for Q in self.found
        ]
        dict_["linesProcessed"] = self.lines_processed
        if self.notes:
            dict_["notes"] = list(self.notes)
        return dict_

    @classmethod
    def from_dict(cls: Type["WalkResult"], dict_: Mapping[str, Any]) -> "WalkResult":
        found: List[Point] = [
            INF if pt.get("inf") else (int(pt["x"]), int(pt["y"]))
            for pt in dict_["found"]
        ]
        point_count = dict_.get("pointCount")
        return cls(
            p=int(dict_["p"]),
            a=int(dict_["A"]),
            b=int(dict_["B"]),
            point_count=None if point_count is None else int(point_count),
            complete=bool(dict_["complete"]),
            found=found,
            lines_processed=int(dict_["linesProcessed"]),
            notes=list(dict_.get("notes", [])),
        )


class WalkEngine:
    """Enumerate the points of a CurveGroup by tangent/secant line walking.

    ec: the curve; singular curves are rejected.
    use_grid: keep explicit p×p FOUND/EXCLUDED bitsets (p <= MAX_GRID_P).
    max_lines: stop after that many processed lines (0 means no cap).
    count_first: count the group points first, to know when to stop.
    max_seed_tries: number of random x draws allowed for each seed search.
    add_negation: also record -R for the third intersection R of each line,
        a shortcut for points the walk would eventually reach anyway.
    rng: random source for the seed search,
        any object with a randrange method (e.g. random.Random(42)).
    """

    def __init__(
        self,
        ec: CurveGroup,
        use_grid: bool = False,
        max_lines: int = 0,
        count_first: bool = False,
        max_seed_tries: int = MAX_SEED_TRIES,
        add_negation: bool = True,
        rng: Optional[Any] = None,
    ) -> None:

        if ec.is_singular():
            raise ConfigurationError("singular curve: zero discriminant")
        if use_grid and ec.p > MAX_GRID_P:
            err_msg = f"grid mode supports p <= {MAX_GRID_P}: {ec.p}"
            raise ConfigurationError(err_msg)
        if max_lines < 0:
            raise ConfigurationError(f"negative max_lines: {max_lines}")
        if max_seed_tries < 1:
            raise ConfigurationError(f"invalid max_seed_tries: {max_seed_tries}")

        self.ec = ec
        self.use_grid = use_grid
        self.max_lines = max_lines
        self.count_first = count_first
        self.max_seed_tries = max_seed_tries
        self.add_negation = add_negation
        self.rng = secrets.SystemRandom() if rng is None else rng

        self.grid: Optional[Grid] = Grid(ec.p) if use_grid else None
        self.point_count: Optional[int] = None
        self.state = WalkState.SEEDING

        self.found: Dict[str, Point] = {}
        # affine points only, in discovery order
        self.order: List[Point] = []
        self.lines_done: Set[str] = set()
        self.tangent_done: Set[str] = set()
        self.secant_done: Set[str] = set()
        self.dead_x: Set[int] = set()
        self.lines_processed = 0

    @staticmethod
    def point_key(P: Point) -> str:
        return "inf" if P == INF else f"{P[0]}|{P[1]}"

    @classmethod
    def pair_key(cls, P: Point, Q: Point) -> str:
        k1 = cls.point_key(P)
        k2 = cls.point_key(Q)
        return f"{k1}#{k2}" if k1 < k2 else f"{k2}#{k1}"

    def is_found(self, P: Point) -> bool:
        return self.point_key(P) in self.found

    def count(self) -> int:
        "Count the group points, INF included, and use them as stopping target."
        _logger.info("counting points of %r", self.ec)
        self.point_count = count_points(self.ec)
        return self.point_count

    @property
    def n_finite(self) -> int:
        return len(self.order)

    def is_complete(self) -> bool:
        if self.point_count is None:
            return False
        return self.n_finite == self.point_count - 1

    def is_capped(self) -> bool:
        return 0 < self.max_lines <= self.lines_processed

    def add_found(self, P: Point) -> bool:
        """Record a newly found point.

        Return False if the point was already known
        or it is not on the curve.
        """

        if not self.ec.is_on_curve(P):
            return False
        k = self.point_key(P)
        if k in self.found:
            return False
        self.found[k] = P
        if P == INF:
            return True

        self.order.append(P)
        if self.grid is not None:
            self.grid.mark_found(*P)
        # no other point can have this x-coordinate
        if P[1] == 0 or self.is_found(self.ec.negate(P)):
            self.dead_x.add(P[0])
        return True

    def process_line(self, P: Point, Q: Optional[Point] = None) -> bool:
        """Process the tangent at P (Q missing) or the secant through P, Q.

        Return False if the line had been already processed.
        """

        line = line_through(self.ec, P, Q)
        if line.key in self.lines_done:
            return False

        R, intersections = third_intersection(self.ec, P, Q)
        for S in intersections:
            self.add_found(S)
        self.add_found(R)
        if self.add_negation:
            self.add_found(self.ec.negate(R))

        if self.grid is not None:
            self.grid.mark_line_exclusions(line, set(intersections))

        self.lines_done.add(line.key)
        self.lines_processed += 1
        return True

    def _must_stop(self) -> bool:
        if self.is_complete():
            self.state = WalkState.COMPLETED
            return True
        if self.is_capped():
            self.state = WalkState.CAPPED
            return True
        return False

    def _walk_point(self, i: int) -> bool:
        "Process the tangent at point i and its secants; False if the walk must stop."

        P = self.order[i]
        pk = self.point_key(P)
        if pk not in self.tangent_done:
            self.process_line(P)
            self.tangent_done.add(pk)
            if self._must_stop():
                return False

        for j in range(i):
            Q = self.order[j]
            pair = self.pair_key(P, Q)
            if pair in self.secant_done:
                continue
            self.process_line(P, Q)
            self.secant_done.add(pair)
            if self._must_stop():
                return False
        return True

    def walk(self) -> WalkState:
        """Process tangents and secants of the discovered points.

        For point i, process its tangent and then
        the secants with all points j < i.
        The order list grows while it is being walked:
        points discovered along the way are walked in the same pass.
        """

        self.state = WalkState.WALKING
        start = self.lines_processed
        # the index cursor sees points appended during the loop
        i = 0
        while i < len(self.order) and not self._must_stop():
            if not self._walk_point(i):
                break
            i += 1

        _logger.debug(
            "walk processed %d lines, %d finite points found",
            self.lines_processed - start,
            self.n_finite,
        )
        return self.state

    def _try_x(self, x: int) -> Optional[Point]:
        "Return a new point with x-coordinate x, if any, marking x dead if none."

        t = self.ec.y2(x)
        ls = legendre_symbol(t, self.ec.p)
        if ls == 1:
            y = mod_sqrt(t, self.ec.p)
            for P in ((x, y), (x, self.ec.p - y)):
                if not self.is_found(P):
                    return P
        elif ls == 0 and not self.is_found((x, 0)):
            return x, 0
        self.dead_x.add(x)
        return None

    def find_seed(self, seed_x: Optional[Integer] = None) -> Point:
        """Return a curve point not found yet.

        seed_x, if provided, is tried first;
        then x-coordinates are drawn at random, skipping dead ones.
        """

        self.state = WalkState.SEEDING
        p = self.ec.p
        if seed_x is not None:
            x = int_from_integer(seed_x) % p
            if x not in self.dead_x:
                P = self._try_x(x)
                if P is not None:
                    _logger.debug("seed %s from preferred x", P)
                    return P

        for _ in range(self.max_seed_tries):
            if len(self.dead_x) >= p:
                break
            x = self.rng.randrange(p)
            if x in self.dead_x:
                continue
            P = self._try_x(x)
            if P is not None:
                _logger.debug("seed %s", P)
                return P

        err_msg = f"no seed found after {self.max_seed_tries} tries"
        err_msg += f" ({len(self.dead_x)} dead x-coordinates out of {p})"
        raise NoSeedFoundError(err_msg)

    def sorted_found(self) -> List[Point]:
        "Return the found points: affine ones sorted by (x, y), then INF."
        result = sorted(self.order)
        if self.is_found(INF):
            result.append(INF)
        return result

    def notes(self) -> List[str]:
        notes: List[str] = []
        if self.state == WalkState.CAPPED:
            notes.append(f"stopped at the {self.max_lines} lines cap")
        if self.state == WalkState.EXHAUSTED and self.point_count is not None:
            notes.append("seed search exhausted before reaching the point count")
        if self.grid is not None:
            n_cells = self.ec.p * self.ec.p
            notes.append(f"excluded {self.grid.n_excluded()} of {n_cells} grid points")
        return notes

    def result(self) -> WalkResult:
        return WalkResult(
            p=self.ec.p,
            a=self.ec.a,
            b=self.ec.b,
            point_count=self.point_count,
            complete=self.is_complete(),
            found=self.sorted_found(),
            lines_processed=self.lines_processed,
            state=self.state,
            n_excluded=None if self.grid is None else self.grid.n_excluded(),
            notes=self.notes(),
        )

    def run(self, seed_x: Optional[Integer] = None) -> WalkResult:
        """Seed, walk, and reseed until complete, capped or out of seeds.

        Without a known group order a single walk is performed
        from a single seed.
        """

        if self.count_first and self.point_count is None:
            self.count()

        _logger.info("seeding %r", self.ec)
        # failing the first seed is fatal
        self.add_found(self.find_seed(seed_x))
        self.walk()

        while self.point_count is not None and self.state == WalkState.WALKING:
            try:
                seed = self.find_seed()
            except NoSeedFoundError as e:
                self.state = WalkState.EXHAUSTED
                _logger.warning("run exhausted: %s", e)
                break
            self.add_found(seed)
            self.walk()

        if self.state == WalkState.WALKING:
            # no target to reach: the walk ran out of lines
            self.state = WalkState.EXHAUSTED
        _logger.info(
            "run %s: %d lines, %d finite points",
            self.state.value,
            self.lines_processed,
            self.n_finite,
        )
        return self.result()


def walk_curve(
    p: Integer, a: Integer, b: Integer, seed_x: Optional[Integer] = None, **kwargs: Any
) -> WalkResult:
    """Walk the curve y^2 = x^3 + a*x + b over Fp.

    Keyword arguments are WalkEngine options.
    """
    ec = CurveGroup(p, a, b)
    return WalkEngine(ec, **kwargs).run(seed_x)

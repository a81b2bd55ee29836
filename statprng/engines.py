"""Pseudo-random number engines with a common interface."""

from __future__ import annotations

import sys
import time
from enum import IntEnum

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

GOLDEN_RATIO_64 = 0x9E3779B97F4A7C15
GOLDEN_RATIO_32 = 0x9E3779B9
SEED_GOLDEN_RATIO = 0x9E3779B9
SEED_TIME_SHIFT = 32
SEED_MWC_MIN = 1
SEED_XSHIFT_MASK = 0xF
WARMUP_DEFAULT = 16
WARMUP_MAX = 1024

MWC_MULTIPLIER_A = 36969
MWC_MULTIPLIER_B = 18000

XORSHIFT_INIT_SEED = 0xBADF00D
XORSHIFT_SEED_STEP = 0x11111111
XORSHIFT_SHIFT_1 = 11
XORSHIFT_SHIFT_2 = 8
XORSHIFT_SHIFT_3 = 19

PCG_MULTIPLIER = 6364136223846793005
PCG_INCREMENT = 1442695040888963407
PCG_ROTATE_BITS = 59
PCG_XSHIFT_BITS = 27
PCG_OUTPUT_BITS = 31

SPLITMIX_INCREMENT = 0x9E3779B97F4A7C15
SPLITMIX_MULT_1 = 0xBF58476D1CE4E5B9
SPLITMIX_MULT_2 = 0x94D049BB133111EB
SPLITMIX_SHIFT_1 = 30
SPLITMIX_SHIFT_2 = 27

FLOAT_2POW32 = 4294967296.0

_CLOCKS_PER_SEC = 1_000_000


class Engine(IntEnum):
    """Available generator algorithms."""

    MARSAGLIA = 0
    XORSHIFT = 1
    C99 = 2
    PCG32 = 3
    SPLITMIX = 4

    def label(self):
        """Human-readable name of the engine."""
        return _LABELS[self]


_LABELS = {
    Engine.MARSAGLIA: "Marsaglia's MWC",
    Engine.XORSHIFT: "XORShift128**",
    Engine.C99: "Standard C99",
    Engine.PCG32: "PCG32",
    Engine.SPLITMIX: "SplitMix64",
}


class _StandardRand:
    """Process-wide linear congruential generator shared by all C99 engines."""

    def __init__(self):
        self._next = 1

    def seed(self, value):
        # Only the low 16 bits are kept, matching the reference runtime.
        self._next = value & 0xFFFF

    def rand(self):
        self._next = (self._next * 1103515245 + 12345) & MASK32
        return (self._next >> 16) & 0x7FFF


_STANDARD_RAND = _StandardRand()


def _clock_ticks():
    return int(time.process_time() * _CLOCKS_PER_SEC)


def default_seed():
    """Seed built from wall-clock time and processor ticks; never zero."""
    seed = (int(time.time()) << SEED_TIME_SHIFT) & MASK64
    seed ^= (_clock_ticks() << (SEED_TIME_SHIFT // 2)) & MASK64
    return seed or SEED_GOLDEN_RATIO


def time_seed():
    """Seed mixing time, processor ticks and an address; never zero."""
    seed = 0
    seed ^= (int(time.time()) << 32) & MASK64
    seed ^= _clock_ticks() & MASK64
    address = id(object()) & MASK64
    seed ^= ((address << 16) | (address >> 16)) & MASK64
    return seed or GOLDEN_RATIO_64


def is_valid_seed(seed, engine):
    """Check an engine's own rules for acceptable seeds."""
    engine = Engine(engine)
    if engine is Engine.MARSAGLIA:
        return seed >= SEED_MWC_MIN
    if engine is Engine.XORSHIFT:
        return (seed & SEED_XSHIFT_MASK) != 0
    return True


def range_u32(r, low, high):
    """Map a 32-bit value into ``[low, high]`` by multiply-shift (slightly biased)."""
    span = (high - low + 1) & MASK32
    return (low + (((r & MASK32) * span) >> 32)) & MASK32


class Prng:
    """A seeded generator driven by one of the :class:`Engine` algorithms."""

    def __init__(self, engine, seed, warmup_rounds=WARMUP_DEFAULT, seed_log=None):
        if not 0 < seed <= MASK64:
            raise ValueError("seed must be a non-zero unsigned 64-bit integer")
        self.engine = Engine(engine)
        self.seed = seed
        # Warm-up and seed logging are accepted but not performed.
        self.warmup_rounds = max(0, min(warmup_rounds, WARMUP_MAX))
        self.seed_log = seed_log

        if self.engine is Engine.MARSAGLIA:
            self._mwc = [(seed + offset) & MASK32 for offset in range(4)]
        elif self.engine is Engine.XORSHIFT:
            self._xs = [
                (seed ^ (XORSHIFT_INIT_SEED + i * XORSHIFT_SEED_STEP)) & MASK32
                for i in range(4)
            ]
        elif self.engine is Engine.C99:
            self._c99_seed = seed & MASK32
            _STANDARD_RAND.seed(seed)
        elif self.engine is Engine.PCG32:
            self._pcg_state = seed
            self._pcg_inc = PCG_INCREMENT
        else:
            self._splitmix = seed

    def _marsaglia_next(self):
        a, b = self._mwc[0], self._mwc[1]
        a = (a * MWC_MULTIPLIER_A + (a >> 16)) & MASK32
        b = (b * MWC_MULTIPLIER_B + (b >> 16)) & MASK32
        self._mwc[0], self._mwc[1] = a, b
        return ((a << 16) + b) & MASK32

    def _xorshift_next(self):
        x = self._xs
        t = x[3]
        t ^= (t << XORSHIFT_SHIFT_1) & MASK32
        t ^= t >> XORSHIFT_SHIFT_2
        first = x[0]
        t ^= first
        t ^= first >> XORSHIFT_SHIFT_3
        self._xs = [t, x[0], x[1], x[2]]
        return t

    def _pcg32_next(self):
        old = self._pcg_state
        self._pcg_state = (old * PCG_MULTIPLIER + PCG_INCREMENT) & MASK64
        xorshifted = (((old >> (64 - PCG_ROTATE_BITS)) ^ old) >> PCG_XSHIFT_BITS) & MASK32
        rot = (old >> PCG_ROTATE_BITS) & MASK32
        left = (-rot) & PCG_OUTPUT_BITS
        return ((xorshifted >> rot) | (xorshifted << left)) & MASK32

    def _splitmix_next(self):
        self._splitmix = (self._splitmix + SPLITMIX_INCREMENT) & MASK64
        z = self._splitmix
        z = ((z ^ (z >> SPLITMIX_SHIFT_1)) * SPLITMIX_MULT_1) & MASK64
        z = ((z ^ (z >> SPLITMIX_SHIFT_2)) * SPLITMIX_MULT_2) & MASK64
        return z >> 32

    def next_u32(self):
        """Next raw output as an unsigned 32-bit integer."""
        if self.engine is Engine.MARSAGLIA:
            return self._marsaglia_next()
        if self.engine is Engine.XORSHIFT:
            return self._xorshift_next()
        if self.engine is Engine.C99:
            return _STANDARD_RAND.rand()
        if self.engine is Engine.PCG32:
            return self._pcg32_next()
        return self._splitmix_next()

    def next_float(self):
        """Next output scaled into ``[0, 1)``."""
        return self.next_u32() / FLOAT_2POW32

    def range_exact(self, low, high):
        """Uniform integer in ``[low, high]`` using rejection sampling."""
        if low == 0 and high == MASK32:
            return self.next_u32()
        span = (high - low + 1) & MASK32
        if span == 0:
            raise ValueError("empty range")
        threshold = ((1 << 32) - span) % span
        r = self.next_u32()
        while r < threshold:
            r = self.next_u32()
        return (low + r % span) & MASK32

    def dump_compact(self, output=None):
        """Write the generator state as a single line to ``output`` (stdout by default)."""
        out = output if output is not None else sys.stdout
        name = self.engine.label()
        if self.engine is Engine.MARSAGLIA:
            line = f"[PRNG] {name} State:a=0x{self._mwc[0]:08X} b=0x{self._mwc[1]:08X}"
        elif self.engine is Engine.XORSHIFT:
            line = f"[PRNG] {name} State:0x{self._xs[0]:08X}..0x{self._xs[3]:08X}"
        elif self.engine is Engine.C99:
            line = f"[PRNG] {name} Seed:0x{self._c99_seed:08X}"
        elif self.engine is Engine.PCG32:
            high = self._pcg_state >> 32
            low = self._pcg_state & MASK32
            line = (
                f"[PRNG] {name} State:0x{high:08X}{low:08X} "
                f"Seq:0x{self._pcg_inc & MASK32:04X}"
            )
        else:
            line = f"[PRNG] {name} State:0x{self._splitmix:016X}"
        out.write(line + "\n")
# statprng

Small, reproducible pseudo-random number generators for statistics and
simulation work. Each generator produces unsigned 32-bit values, and a
generator given the same seed gives the same sequence every time.

## Engines

`statprng.engines.Engine` is an `IntEnum`. `Engine.label()` returns a readable name:

| Member      | `label()`         | Algorithm                          |
|-------------|-------------------|------------------------------------|
| `MARSAGLIA` | `Marsaglia's MWC` | Marsaglia's multiply-with-carry    |
| `XORSHIFT`  | `XORShift128**`   | XORShift128                        |
| `C99`       | `Standard C99`    | C99-style `rand()` LCG             |
| `PCG32`     | `PCG32`           | Permuted congruential generator    |
| `SPLITMIX`  | `SplitMix64`      | SplitMix64                         |

The `C99` engine uses one generator for the whole process. Every `C99`
`Prng` shares it, and seeding a new one reseeds it from the low 16 bits of
the seed. Its outputs fall in `0..32767`.

## Installation

```
pip install .
```

## Usage

```python
from statprng.engines import Engine, Prng, default_seed, time_seed, is_valid_seed, range_u32

rng = Prng(Engine.PCG32, 0xDEADBEEF)
rng.next_u32()          # unsigned 32-bit value
rng.next_float()        # next_u32() / 2**32, in [0, 1)
rng.range_exact(1, 6)   # uniform in [1, 6], by rejection sampling

# Fast multiply-shift mapping of a raw 32-bit value into [low, high], with a tiny bias
die = range_u32(rng.next_u32(), 1, 6)

# Seeds taken from the clock (never zero)
rng = Prng(Engine.SPLITMIX, default_seed())
rng = Prng(Engine.XORSHIFT, time_seed())

# One-line summary of the internal state, written to a stream (stdout by default)
rng.dump_compact()
```

`Prng(engine, seed, warmup_rounds=16, seed_log=None)` raises `ValueError`
unless the seed is a non-zero unsigned 64-bit integer. `warmup_rounds` is
clamped to `0..1024` and stored, and `seed_log` is stored too. Neither is
acted on: no warm-up rounds are run and nothing is logged.

`is_valid_seed(seed, engine)` applies an engine's own seed rules. `MARSAGLIA`
needs a seed of at least 1. `XORSHIFT` needs at least one of the low four bits
set. Every other engine accepts any seed.

## Bit counting

```python
from statprng.popcount import popcount

popcount(0xF0F0F0F0)    # 16
```

`popcount` counts only the low 32 bits of its argument.

## What this package does not include

It is a library only. It has no command-line program. It has no statistics
routines, distributions or graphing built on the generators.

## Running the tests

```
pip install .[test]
pytest
```
# eventgen

Building blocks for generating and handling simulated collision events in pure Python, with no dependencies outside the standard library.

## The event records

`eventgen.event` defines two kinds of record:

- A small graph-shaped event record: `FourVector`, `GenParticle`, `GenVertex` and `GenEvent`. A `FourVector` offers `perp()`, `eta()`, `p2()` and `m()`. Vertices are joined to particles with `GenVertex.add_particle_in` and `GenVertex.add_particle_out`. `GenEvent.add_vertex` adds a vertex together with every particle attached to it.
- A flat particle record: `MCParticle`. It holds PDG code, generator status, charge, momentum, mass, vertex, time, spin, and lists of parents and daughters. `MCParticle.energy()` returns the energy computed from momentum and mass.

The module also defines the abstract tool interfaces `HepMCProvider`, `VertexSmearer`, `PileUpTool` and `MergeTool`. Unit constants are given for internal use: lengths in mm, times in ns, energies in MeV, plus `GEV`, `RAD`, `TWOPI` and `C_LIGHT`.

## Tools

- **Particle guns** (`eventgen.guns`):
  - `MomentumRangeParticleGun` draws momentum, polar angle and azimuth flat within their ranges.
  - `ConstPtParticleGun` draws transverse momentum and pseudorapidity. It takes them from `pt_list` and `eta_list` when these are given. Otherwise it draws them flat, or log-spaced in pT if `log_spaced_pt` is set.
  - For both guns, `generate_particle()` returns a `GunShot`, and `get_next_event(event)` adds one final-state particle at the origin.
  - Momenta are converted from MeV to GeV when written into the event.
  - Masses come from a small built-in table (`nominal_mass`); unknown codes get mass zero. You can pass your own `mass_of` function instead.
  - `ConstPtParticleGun` records the last drawn pt, eta, cos(theta) and phi in its `branches` dictionary when `write_branches` is on.
- **Pile-up multiplicity** (`eventgen.pileup`):
  - `ConstPileUp` always returns the same number.
  - `PoissonPileUp` draws from a Poisson distribution.
  - `RangePileUp` cycles through a fixed list of values.
- **Vertex smearing** (`eventgen.smearing`):
  - `FlatSmearVertex` applies a uniform offset in x, y and z, with a time of flight set by `beam_direction` (-1, 0 or 1).
  - `GaussSmearVertex` applies a Gaussian offset in x, y, z and t.
  - Both shift every vertex of an event by one common offset, which `smear_vertex` returns.
- **Event merging** (`eventgen.merge`):
  - `HepMCSimpleMerge` adds only the final-state particles of the pile-up events. These are particles with status 1 and no end vertex.
  - `HepMCFullMerge` copies every vertex and particle of the pile-up events.
- **Orchestration** (`eventgen.genalg`): `GenAlg.execute()` builds one merged event. It produces a signal event, smears it, generates and smears the pile-up events, then merges them in.
  - By default both providers are `MomentumRangeParticleGun`. The other defaults are `ConstPileUp` (zero pile-up), `FlatSmearVertex` (zero offset) and `HepMCSimpleMerge`.
  - Passing `None` for a provider switches it off.
- **Readers**:
  - `HepEVTReader` (`eventgen.hepevt`) reads HepEVT text files event by event.
  - `MDIReader` (`eventgen.mdi`) reads the whole of a machine-detector-interface background file as one event. It supports the `InputType` layouts `guineapig`, `xtrack`, `photons` and `general`.
  - Both return lists of `MCParticle` and can be used as context managers.
- **Conversion** (`eventgen.converters`):
  - `hepmc_to_edm(event)` turns a `GenEvent` into `MCParticle` objects, keeping mother and daughter links.
  - `edm_to_hepmc(particles)` builds a `GenEvent` of the final-state particles, each at its own vertex. The fourth momentum component of each particle carries its mass.
  - Charges are derived from PDG codes unless you pass a `charge_of` function.
- **Filtering**:
  - `filter_particles(particles, accept)` (`eventgen.particle_filter`) returns copies of the particles whose generator status is accepted. By default only status 1 is accepted.
  - `ResonanceDecayFilter.check_veto(process)` (`eventgen.resonance_filter`) decides whether a hard-process record must be vetoed. The record is a sequence of `ProcessEntry`. The filter compares the observed decay products with the requested daughters, in inclusive or exclusive mode, with optional equivalence classes such as e/mu or u/d/s/c.
- **Histograms** (`eventgen.histograms`):
  - `Histogram1D` is a fixed-width histogram with under- and overflow.
  - `HepMCHistograms.fill_event(event)` fills particle pT and pseudorapidity and vertex transverse and longitudinal position.

All tools that draw random numbers accept an `rng` argument, a `random.Random` instance, for reproducible results.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Generate, smear and inspect one event:

```python
import random

from eventgen.event import GenEvent
from eventgen.guns import MomentumRangeParticleGun
from eventgen.smearing import GaussSmearVertex

rng = random.Random(1)
gun = MomentumRangeParticleGun(pdg_codes=(11, -11), rng=rng)
smearer = GaussSmearVertex(x_sigma=0.01, y_sigma=0.01, z_sigma=1.0, rng=rng)

event = GenEvent()
gun.get_next_event(event)
smearer.smear_vertex(event)

for particle in event.particles():
    print(particle.pdg_id, particle.momentum.perp())
```

Signal plus Poisson pile-up:

```python
from eventgen.genalg import GenAlg
from eventgen.pileup import PoissonPileUp

alg = GenAlg(pile_up_tool=PoissonPileUp(mean_pile_up_events=5.0))
event = alg.execute()
print(len(event.particles()))
```

Reading a HepEVT file:

```python
from eventgen.hepevt import HepEVTError, HepEVTReader

try:
    with HepEVTReader("events.hepevt") as reader:
        for particles in reader:
            print(len(particles))
except HepEVTError as exc:
    print("could not read events:", exc)
```

## Errors

Bad configuration and malformed input raise exceptions rather than returning status values:

- `ValueError` for a minimum above its maximum, a negative mean pile-up, or an invalid beam direction.
- `HepEVTError` for a missing or truncated HepEVT file.
- `MDIError` for an unknown MDI input type or an unreadable file.

## What it does not do

- It does not run a physics generator such as a matrix-element or parton-shower program. `ResonanceDecayFilter` works only on process records that you supply.
- It does not read or write HepMC ASCII files.
- It does not write histograms to files; `Histogram1D` keeps its counts in memory.
- There is no command-line program; everything is used as a library.
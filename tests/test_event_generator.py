from __future__ import annotations

import math
import tempfile
import threading
import unittest

import numpy as np

from pypion import constants as C
from pypion.event_generator import GENERATOR_LOCK, ResonanceEventGenerator
from pypion.photopion import Channel, PhotoPionProduction
from pypion.particle_id import ParticleId, PROTON
from pypion.random_streams import spawn_rngs

from support import FixedGammaState, write_tables

KNOWN_CODES = {
    C.GEN_PHOTON,
    C.GEN_POSITRON,
    C.GEN_ELECTRON,
    C.GEN_PROTON,
    C.GEN_NEUTRON,
    C.GEN_NU_E,
    C.GEN_ANTINU_E,
    C.GEN_NU_MU,
    C.GEN_ANTINU_MU,
}


class LockCheckingGenerator:
    def __init__(self) -> None:
        self.locked = []

    def sample_event(self, nature, energy, redshift, background, max_redshift):
        self.locked.append(GENERATOR_LOCK.locked())
        return [(C.GEN_PROTON, energy)]


class TestResonanceEventGenerator(unittest.TestCase):
    def test_energy_is_conserved(self) -> None:
        gen = ResonanceEventGenerator(rng=np.random.default_rng(7))
        for nature in (0, 1):
            for _ in range(50):
                products = gen.sample_event(nature, 1.0e11, 0.0, 1, 100.0)
                self.assertTrue(math.isclose(sum(p.energy for p in products), 1.0e11, rel_tol=1.0e-12))
                self.assertTrue({p.code for p in products} <= KNOWN_CODES)

    def test_exactly_one_nucleon_and_charge_conserved(self) -> None:
        gen = ResonanceEventGenerator(rng=np.random.default_rng(11))
        charge = {C.GEN_PROTON: 1, C.GEN_POSITRON: 1, C.GEN_ELECTRON: -1}
        for nature, initial in ((0, 1), (1, 0)):
            for _ in range(50):
                products = gen.sample_event(nature, 1.0e10, 0.0, 2, 100.0)
                nucleons = [p for p in products if p.code in (C.GEN_PROTON, C.GEN_NEUTRON)]
                self.assertEqual(len(nucleons), 1)
                self.assertEqual(sum(charge.get(p.code, 0) for p in products), initial)

    def test_nucleon_keeps_resonance_fraction(self) -> None:
        gen = ResonanceEventGenerator(rng=np.random.default_rng(3))
        products = gen.sample_event(0, 1232.0, 0.0, 1, 100.0)
        self.assertAlmostEqual(products[0].energy, 938.0)

    def test_invalid_nature(self) -> None:
        with self.assertRaises(ValueError):
            ResonanceEventGenerator().sample_event(2, 1.0, 0.0, 1, 100.0)

    def test_drives_photopion_module(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            module = PhotoPionProduction(
                data_dir=write_tables(tmp),
                have_photons=True,
                have_neutrinos=True,
                generator=ResonanceEventGenerator(rng=np.random.default_rng(5)),
                backend="numpy",
            )
        state = FixedGammaState(PROTON, 1.0 * C.EeV, 1.0e11)
        module.perform_interaction(state, Channel.PROTON)
        self.assertEqual(state.particle_id.mass_number, 1)
        self.assertTrue(math.isclose(state.energy, C.EeV * 938.0 / 1232.0, rel_tol=1.0e-9))
        self.assertGreaterEqual(len(state.secondaries), 2)


class TestSerializedGenerator(unittest.TestCase):
    def test_generator_runs_under_lock(self) -> None:
        generator = LockCheckingGenerator()
        with tempfile.TemporaryDirectory() as tmp:
            module = PhotoPionProduction(data_dir=write_tables(tmp), generator=generator, backend="numpy")

        def work() -> None:
            for _ in range(20):
                state = FixedGammaState(ParticleId.nucleus(12, 6), 12.0 * C.EeV, 1.0e11)
                module.perform_interaction(state, Channel.PROTON)

        threads = [threading.Thread(target=work) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(generator.locked), 80)
        self.assertTrue(all(generator.locked))
        self.assertFalse(GENERATOR_LOCK.locked())


class TestRandomStreams(unittest.TestCase):
    def test_streams_are_independent_and_reproducible(self) -> None:
        first = [rng.random() for rng in spawn_rngs(42, 3)]
        second = [rng.random() for rng in spawn_rngs(42, 3)]
        self.assertEqual(first, second)
        self.assertEqual(len(set(first)), 3)

    def test_needs_one_stream(self) -> None:
        with self.assertRaises(ValueError):
            spawn_rngs(1, 0)


if __name__ == "__main__":
    unittest.main()

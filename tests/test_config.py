from __future__ import annotations

from dataclasses import FrozenInstanceError, replace
import math
from pathlib import Path
import unittest

from pypion.config import ProcessConfig
from pypion.photon_field import PhotonField, photon_field_scaling


class TestProcessConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = ProcessConfig()
        self.assertIs(cfg.photon_field, PhotonField.CMB)
        self.assertFalse(cfg.have_photons)
        self.assertFalse(cfg.have_neutrinos)
        self.assertFalse(cfg.have_antinucleons)
        self.assertEqual(cfg.limit, 0.1)
        self.assertEqual(cfg.max_redshift, 100.0)
        self.assertEqual(cfg.backend, "auto")

    def test_photon_field_from_name(self) -> None:
        self.assertIs(ProcessConfig(photon_field="irb_kneiske10").photon_field, PhotonField.IRB_Kneiske10)
        self.assertIs(ProcessConfig(photon_field=" CMB ").photon_field, PhotonField.CMB)

    def test_unknown_photon_field(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown photon background"):
            ProcessConfig(photon_field="radio")

    def test_flags_are_coerced(self) -> None:
        cfg = ProcessConfig(have_photons=1, have_neutrinos=0)
        self.assertIs(cfg.have_photons, True)
        self.assertIs(cfg.have_neutrinos, False)

    def test_invalid_values(self) -> None:
        for kwargs in (
            {"limit": 0.0},
            {"limit": -1.0},
            {"limit": math.inf},
            {"limit": math.nan},
            {"max_redshift": 0.0},
            {"backend": "jax"},
            {"data_dir": Path(" ")},
        ):
            with self.subTest(**{k: str(v) for k, v in kwargs.items()}):
                with self.assertRaises(ValueError):
                    ProcessConfig(**kwargs)

    def test_frozen_and_replace_revalidates(self) -> None:
        cfg = ProcessConfig()
        with self.assertRaises(FrozenInstanceError):
            cfg.limit = 0.5
        self.assertEqual(replace(cfg, limit=0.25).limit, 0.25)
        with self.assertRaises(ValueError):
            replace(cfg, limit=-0.25)


class TestPhotonField(unittest.TestCase):
    def test_files_and_aliases(self) -> None:
        self.assertEqual(PhotonField.CMB.filename, "ppp_CMB.txt")
        self.assertEqual(PhotonField.IRB.filename, PhotonField.IRB_Kneiske04.filename)
        self.assertEqual(PhotonField.IRB_withRedshift_Kneiske04.filename, "ppp_IRBz_Kneiske04.txt")
        self.assertTrue(PhotonField.IRB_withRedshift_Kneiske04.redshift_dependent)
        self.assertFalse(PhotonField.IRB_Stecker05.redshift_dependent)

    def test_generator_background_code(self) -> None:
        self.assertEqual(PhotonField.CMB.generator_code, 1)
        for field in PhotonField:
            if field is not PhotonField.CMB:
                self.assertEqual(field.generator_code, 2)

    def test_scaling(self) -> None:
        self.assertEqual(photon_field_scaling(PhotonField.CMB, 3.0), 1.0)
        self.assertAlmostEqual(photon_field_scaling(PhotonField.IRB, 0.0), 1.0)
        self.assertAlmostEqual(photon_field_scaling(PhotonField.IRB_Franceschini08, 1.0), 5.1980)
        self.assertAlmostEqual(photon_field_scaling(PhotonField.IRB, 0.1), 0.5 * (1.0 + 1.6937))
        self.assertEqual(photon_field_scaling(PhotonField.IRB, 7.0), 0.0)


if __name__ == "__main__":
    unittest.main()

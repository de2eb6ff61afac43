"""Command line inspection of photo-pion rate tables and loss lengths."""

from __future__ import annotations

import argparse
import json
import logging

from .constants import Mpc
from .diagnostics import loss_length_curve, table_diagnostics
from .particle_id import NEUTRON, PROTON, ParticleId
from .photon_field import PhotonField
from .photopion import PhotoPionProduction


def parse_species(text: str) -> ParticleId:
    key = text.strip().lower()
    if key in ("p", "proton"):
        return PROTON
    if key in ("n", "neutron"):
        return NEUTRON
    try:
        A, Z = (int(v) for v in key.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"species must be proton, neutron or 'A,Z', got {text!r}") from exc
    return ParticleId.nucleus(A, Z)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Inspect photo-pion production rate tables and loss lengths.")
    ap.add_argument("--field", default="CMB", choices=[f.value for f in PhotonField], help="Photon background")
    ap.add_argument("--data-dir", default=None, help="Directory holding the ppp_*.txt tables")
    ap.add_argument("--species", type=parse_species, default=PROTON, help="proton, neutron or 'A,Z'")
    ap.add_argument("--redshift", type=float, default=0.0)
    ap.add_argument("--points", type=int, default=50)
    ap.add_argument("--backend", default="auto", choices=["auto", "numpy", "numba"])
    ap.add_argument("--plot", default=None, help="Write a loss-length plot to this file")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    module = PhotoPionProduction(args.field, data_dir=args.data_dir, backend=args.backend)
    gammas, lengths = loss_length_curve(module, args.species, redshift=args.redshift, points=args.points)
    res = {
        "description": module.description,
        "species": str(args.species),
        "redshift": args.redshift,
        "table": table_diagnostics(module.table),
        "loss_length_mpc": [[float(g), float(l / Mpc)] for g, l in zip(gammas, lengths)],
    }
    if args.plot:
        from .plotting import create_loss_length_plot

        res["plot"] = create_loss_length_plot(
            module, [args.species], args.plot, redshift=args.redshift, points=args.points
        )
    print(json.dumps(res, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()

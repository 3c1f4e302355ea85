"""Export byte-indexed residue mass tables to a compressed .npz file.

Arrays are indexed by the byte of the one-letter residue code (unset slots are
NaN) and cover the common residues:
- residue_mass: uncharged residue mass (backbone plus side chain).
- immonium_mass: residue mass plus the immonium ion delta (-CO+H).

Example:
    python scripts/export_residue_table.py \\
        --output data/processed/residue_masses.npz \\
        --element_table monoisotopic
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from molecules.chemistry import ELEMENT_TABLES, get_element_table
from molecules.residues import ASCII_SIZE, ResidueLibrary, build_residues, immonium_mass_array, residue_mass_array


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export residue mass lookup tables.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data/processed/residue_masses.npz"),
        help="Path to save the mass tables (.npz).",
    )
    parser.add_argument(
        "--element_table",
        type=str,
        default="monoisotopic",
        choices=sorted(ELEMENT_TABLES),
        help="Element masses used to compute residue masses.",
    )
    parser.add_argument("--size", type=int, default=ASCII_SIZE, help="Length of each byte-indexed array.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    elements = get_element_table(args.element_table)
    library = ResidueLibrary(build_residues(elements=elements))
    print(f"Built library of {len(library)} residues ({len(library.common)} common) with {elements.name} masses")

    residue_mass = residue_mass_array(library, size=args.size)
    immonium_mass = immonium_mass_array(library, size=args.size)
    letters = np.array(sorted(chr(byte) for byte in library.residue_index))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    np.savez_compressed(
        args.output,
        residue_mass=residue_mass,
        immonium_mass=immonium_mass,
        letters=letters,
        element_table=args.element_table,
    )
    print(f"Saved residue mass tables to {args.output} ({len(letters)} residues, size={args.size})")


if __name__ == "__main__":
    main()

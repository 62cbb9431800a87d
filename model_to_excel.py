#!/usr/bin/env python3
"""Convert a persisted term model (.mdl) to Excel (.xlsx) format."""

import sys
from pathlib import Path

import pandas as pd

# Ensure src is on path when run from project root
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from wiki_modeler.models.term_model import TermFrequencyModel


def model_to_frame(model: TermFrequencyModel) -> pd.DataFrame:
    """One row per term: term, count, probability; most frequent first."""
    rows = [
        {
            "term": term,
            "count": model.get_term_count(term),
            "probability": model.get_term_probability(term),
        }
        for term in model.get_vocabulary()
    ]
    df = pd.DataFrame(rows, columns=["term", "count", "probability"])
    return df.sort_values(["count", "term"], ascending=[False, True], ignore_index=True)


def model_to_excel(model_path: str, excel_path: str | None = None) -> None:
    """
    Convert model file to Excel format.

    Args:
        model_path: Path to input model file
        excel_path: Path to output Excel file (default: same name with .xlsx extension)
    """
    model_file = Path(model_path)
    if not model_file.exists():
        print(f"ERROR: File not found: {model_path}")
        sys.exit(1)

    if excel_path is None:
        excel_path = model_file.with_suffix(".xlsx")
    else:
        excel_path = Path(excel_path)

    model = TermFrequencyModel.deserialize(model_file)
    if model.get_model_size() == 0:
        print("ERROR: Model is empty or could not be loaded")
        sys.exit(1)

    df = model_to_frame(model)
    df.to_excel(excel_path, index=False, engine="openpyxl")
    print(f"✓ Converted {len(df)} terms from {model_file.name} to {excel_path.name}")
    print(f"  Total term count: {model.total_term_count}")
    print(f"  Output file: {excel_path.absolute()}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python model_to_excel.py <input.mdl> [output.xlsx]")
        print("\nExample:")
        print("  python model_to_excel.py files/model_files/women.mdl")
        print("  python model_to_excel.py files/model_files/women.mdl output/women.xlsx")
        sys.exit(1)

    input_file = sys.argv[1]
    output_file = sys.argv[2] if len(sys.argv) > 2 else None
    model_to_excel(input_file, output_file)

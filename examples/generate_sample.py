"""
Example usage of the record generator.

Writes a small employee file and a teacher file with the delimited-text
separator, then reads both back.
"""

from pathlib import Path

from personnel_synth import RecordKind, create_data_file
from personnel_synth.serialise import iter_records, load_dataframe


def example_employees(output_dir: Path):
    """Generate five employees and show the anchored manager chain."""
    print("=== Employees ===\n")

    path = output_dir / "employees.avro"
    ok = create_data_file(count=5, seed=42, output_path=path, kind=RecordKind.EMPLOYEE)
    print(f"Written: {ok} -> {path}")

    df = load_dataframe(path)
    print(df[["uid", "name", "hire_date", "salary_amount"]])

    first = next(iter_records(path))
    chain = [manager["uid"] for manager in first["managers"]]
    print(f"First record's manager chain: {chain}\n")


def example_delimited_quirk(output_dir: Path):
    """A .csv path gets a ';' token after the first record."""
    print("=== Teachers (.csv path) ===\n")

    path = output_dir / "teachers.csv"
    create_data_file(count=3, seed=7, output_path=path, kind="T")

    for datum in iter_records(path):
        if isinstance(datum, str):
            print(f"  separator: {datum!r}")
        else:
            print(f"  {datum['name']} teaches {datum['subject']}")


if __name__ == "__main__":
    out = Path("data/synthetic")
    example_employees(out)
    example_delimited_quirk(out)

"""Search the style database by keyword."""

import csv
import sys
from pathlib import Path

DATA = Path(__file__).resolve().parent.parent / "data" / "styles.csv"


def search(query: str, limit: int = 3) -> list[dict]:
    terms = query.lower().split()
    with DATA.open(newline="") as f:
        rows = list(csv.DictReader(f))
    scored = []
    for row in rows:
        text = f"{row['name']} {row['keywords']}".lower()
        score = sum(term in text for term in terms)
        if score:
            scored.append((score, row))
    scored.sort(key=lambda item: item[0], reverse=True)
    return [row for _, row in scored[:limit]]


if __name__ == "__main__":
    for row in search(" ".join(sys.argv[1:])):
        print(f"{row['name']}: {row['primary']} / {row['secondary']} ({row['font']})")

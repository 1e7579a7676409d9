#!/usr/bin/env python3
"""Carry search aliases over to a freshly exported heroes.json.

Hero exports from the stats backend don't include the hand-written search
aliases. This copies aliases from the current knowledge/heroes.json into the
new file by HeroId. Heroes that already have aliases in the new file keep them.

Usage:
    uv run python backend/scripts/merge_hero_aliases.py path/to/new/heroes.json

Output: knowledge/heroes.json (overwritten unless --output is given)
"""
import argparse
import json
from pathlib import Path


def read_json(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def merge_aliases(current: list[dict], new: list[dict]) -> tuple[list[dict], int]:
    """Return new heroes with aliases filled from current, plus how many were filled."""
    alias_map = {
        hero["HeroId"]: hero["aliases"]
        for hero in current
        if isinstance(hero, dict) and hero.get("HeroId") is not None and hero.get("aliases")
    }

    merged = []
    filled = 0
    for hero in new:
        if not isinstance(hero, dict) or hero.get("HeroId") is None or hero.get("aliases"):
            merged.append(hero)
            continue
        aliases = alias_map.get(hero["HeroId"])
        if aliases:
            hero = {**hero, "aliases": aliases}
            filled += 1
        merged.append(hero)
    return merged, filled


def main():
    parser = argparse.ArgumentParser(description="Merge hero search aliases into a new heroes.json")
    parser.add_argument("new_heroes", type=Path, help="Freshly exported heroes.json")
    parser.add_argument("--knowledge-dir", type=Path, default=Path("knowledge"),
                        help="Knowledge directory containing the current heroes.json (default: knowledge)")
    parser.add_argument("--output", type=Path, default=None,
                        help="Where to write the merged file (default: <knowledge-dir>/heroes.json)")

    args = parser.parse_args()

    current_path = args.knowledge_dir / "heroes.json"
    if not current_path.exists():
        raise FileNotFoundError(f"Current heroes file not found: {current_path}")
    if not args.new_heroes.exists():
        raise FileNotFoundError(f"New heroes file not found: {args.new_heroes}")

    merged, filled = merge_aliases(read_json(current_path), read_json(args.new_heroes))
    output = args.output or current_path
    write_json(output, merged)
    print(f"Merged aliases for {filled} heroes into {output} ({len(merged)} heroes total)")


if __name__ == "__main__":
    main()

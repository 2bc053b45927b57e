"""Inspect a stored page document: layers, headings, and class usage."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from pagebuilder.addressing import iter_nodes
from pagebuilder.migration import normalize_blocks
from pagebuilder.outline import count_nodes, has_h1, heading_outline, render_layers, section_anchors
from pagebuilder.serialization import deserialize_document
from pagebuilder.styles import compose_class_name
from pagebuilder.validation import structure_problems


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect a page builder document (JSON with a 'blocks' list).")
    parser.add_argument("file", help="Path to the page document JSON file")
    parser.add_argument("--migrate", action="store_true", help="Apply legacy migration before inspecting")
    parser.add_argument("--classes", action="store_true", help="Show class token usage")
    args = parser.parse_args()

    tree = deserialize_document(Path(args.file).read_text(encoding="utf-8"))
    if args.migrate:
        result = normalize_blocks(tree)
        tree = result.blocks
        if result.did_migrate:
            print("(legacy page migrated)\n")

    print("Layers:")
    print(render_layers(tree) or "(empty)")

    print("\nNode counts:")
    for name, count in sorted(count_nodes(tree).items()):
        print(f"{name}: {count}")

    print("\nSections:")
    for anchor in section_anchors(tree):
        print(f"#{anchor.anchor}  {anchor.label}")

    print("\nHeadings:")
    for entry in heading_outline(tree):
        print("  " * (entry.level - 1) + f"H{entry.level} {entry.text}")
    if not has_h1(tree):
        print("warning: page has no H1")

    problems = structure_problems(tree, allow_legacy=not args.migrate)
    if problems:
        print("\nProblems:")
        for problem in problems:
            print(f"- {problem}")

    if args.classes:
        tokens: Counter[str] = Counter()
        for _, node in iter_nodes(tree):
            tokens.update(compose_class_name(node).split())
        print("\nClasses:")
        for name, count in tokens.most_common():
            print(f"{name}: {count}")


if __name__ == "__main__":
    main()

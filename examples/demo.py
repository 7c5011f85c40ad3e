"""Demo script: derive an icon from a wallet address and export it."""

from pathlib import Path

from ethicon import generate_icon, normalise_address

ADDRESS = "0x5AAe2D4c8c1E9f6a3b2d7E0f1A4c6B8d9e2F3a5C"
OUTPUT = Path(__file__).resolve().parent


def main():
    identifier = normalise_address(ADDRESS)
    icon = generate_icon(identifier)
    print(f"Identifier: {icon.identifier}")
    print(f"Palette: {['#' + c for c in icon.palette]}")
    print(f"Shapes: {[s.character for s in icon.shapes]}")

    icon.render_svg(OUTPUT / f"ethicon-{identifier}.svg")
    path = icon.export_png(OUTPUT)
    print(f"Rendered to {path}")


if __name__ == "__main__":
    main()

"""Generate static images for the documentation."""

from pathlib import Path

import matplotlib.pyplot as plt

from ethicon import IconStyle, generate_icon, random_address, render_mpl

OUT = Path(__file__).resolve().parent

GALLERY_TOKENS = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta"]


def generate_docs_images() -> None:
    # Single icon used on the front page.
    icon = generate_icon("aabbccddaabbccdd")
    icon.render_svg(OUT / "aabbccddaabbccdd.svg")
    print(f"  wrote {OUT / 'aabbccddaabbccdd.svg'}")

    # Gallery of reproducible pseudo-addresses.
    fig, axes = plt.subplots(2, 3, figsize=(6, 4))
    for ax, token in zip(axes.flat, GALLERY_TOKENS):
        gallery_icon = generate_icon(random_address(40, token=token))
        render_mpl(gallery_icon, ax=ax)
        ax.set_title(gallery_icon.identifier[:8], fontsize=8)
    fig.tight_layout()
    fig.savefig(OUT / "gallery.svg")
    plt.close(fig)
    print(f"  wrote {OUT / 'gallery.svg'}")

    # Style variation for the user guide.
    style = IconStyle(edge_colour="black", edge_width=1.0, alpha=0.7)
    icon.render_svg(OUT / "outlined.svg", style=style)
    print(f"  wrote {OUT / 'outlined.svg'}")


if __name__ == "__main__":
    generate_docs_images()

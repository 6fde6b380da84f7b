"""
Plotting a gradient's colors.

This script samples a gradient and plots the samples' hue and chroma on a polar
plane as well as their luminance as a bar chart. The polar plane shows the arc
traveled by a gradient's hue, which makes it easy to compare hue directions
and color spaces.
"""
import sys

try:
    import matplotlib.pyplot as plt
except ImportError:
    print("colorblend.plot requires matplotlib. Please install the package,")
    print("e.g., by executing `pip install colorblend[plot]`, and then")
    print("run `python -m colorblend.plot` again.")
    sys.exit(1)

import argparse
import math
from typing import Any

from .cli import add_gradient_options, gradient_from_options
from .color import Color
from .gradient import GradientSpec


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="""
            Plot a gradient's colors on the hue/chroma plane of HCL, i.e., the
            cylindrical form of CIE Lab, together with a bar chart of their
            luminance. The gradient options are the same as for colorblend.
        """,
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="run silently, without printing status updates"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="run in verbose mode, which prints each sample to the console"
    )
    parser.add_argument(
        "-n", "--samples",
        type=int,
        default=64,
        help="number of colors sampled from the gradient (default: 64)"
    )
    parser.add_argument(
        "-o", "--output",
        default="gradient.svg",
        help="write gradient plot to the named file (default: gradient.svg)"
    )
    return add_gradient_options(parser)


class GradientPlotter:
    def __init__(self, gradient: GradientSpec, volume: int = 1) -> None:
        self._gradient = gradient
        self._volume = volume

        self._colors: list[str] = []
        self._hues: list[float] = []
        self._chromas: list[float] = []
        self._luminances: list[float] = []
        self._achromatic_count = 0

    def status(self, msg: str) -> None:
        if self._volume >= 1:
            print(msg)

    def detail(self, msg: str) -> None:
        if self._volume >= 2:
            print(msg)

    def add_samples(self, count: int) -> None:
        self.status(f"Sampling gradient at {count} points")
        self.detail("   #  Color    Hue    Chroma  Luminance")
        self.detail("---------------------------------------")

        for index, color in enumerate(self._gradient.sample(count)):
            self.add(index, color)

        self.status(
            f"Sampled {len(self._colors)} colors, "
            f"{self._achromatic_count} of them achromatic"
        )

    def add(self, index: int, color: Color) -> None:
        h, c, l = color.hcl()
        hue = "  n/a" if math.isnan(h) else f"{h:5.1f}"
        self.detail(f"{index:4}  {color}  {hue}  {c:6.2f}  {l:9.2f}")

        if math.isnan(h):
            self._achromatic_count += 1
            h = c = 0.0

        self._colors.append(str(color))
        self._hues.append(h * math.pi / 180)
        self._chromas.append(c)
        self._luminances.append(l)

    def format_title(self) -> str:
        gradient = self._gradient
        title = f"{gradient.start} to {gradient.end} in {gradient.space.value.upper()}"
        if gradient.space.polar:
            title += f", {gradient.hue_direction.value}"
        if gradient.steps > 0:
            title += f", {gradient.steps} steps"
        if gradient.invert:
            title += ", inverted"
        return title

    def create_figure(self) -> Any:
        self.status("Creating figure")

        fig: Any = plt.figure(layout="constrained", figsize=(5, 6.5))  # type: ignore
        axes: Any = fig.add_subplot(6, 10, (1, 50), polar=True)
        light_axes: Any = fig.add_subplot(6, 10, (51, 60))

        # The path connects samples in order; markers sit on top
        axes.plot(self._hues, self._chromas, color="#999", linewidth=1, zorder=4)
        axes.scatter(
            self._hues,
            self._chromas,
            c=self._colors,
            s=40,
            edgecolors="#000",
            linewidths=0.5,
            zorder=5,
        )
        axes.set_rmin(0)
        axes.set_rmax(max([*self._chromas, 1.0]) * 1.1)
        axes.set_rlabel_position(0)
        axes.set_axisbelow(True)

        light_axes.bar(
            [x for x in range(len(self._luminances))],
            self._luminances,
            width=1.0,
            color=self._colors,
            zorder=5,
        )
        light_axes.set_ylim(0, 100)
        light_axes.set_yticks([0, 50, 100], minor=False)
        light_axes.set_yticks([25, 75], minor=True)
        light_axes.yaxis.grid(True, which="major")
        light_axes.yaxis.grid(True, which="minor")
        light_axes.margins(x=0.01, tight=True)
        light_axes.get_xaxis().set_visible(False)

        fig.suptitle(self.format_title(), ha="left", x=0.044, weight="bold", size=13)
        axes.set_title("Hue & Chroma", style="italic", size=13, x=0.11, y=1.01)
        fig.text(0.09, 0.185, "Luminance", fontdict=dict(style="italic", size=13))

        return fig


def main(options: Any) -> None:
    if options.samples < 2:
        raise ValueError(f"cannot plot gradient with {options.samples} samples")

    plotter = GradientPlotter(
        gradient_from_options(options),
        volume=1-options.quiet+options.verbose,
    )
    plotter.add_samples(options.samples)

    fig = plotter.create_figure()
    plotter.status(f"Saving plot to `{options.output}`")
    fig.savefig(options.output, bbox_inches="tight")  # type: ignore


if __name__ == "__main__":
    main(create_parser().parse_args())

"""Command that clusters two point files and shows the results."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from .crisp import CrispClustering
from .data import Data
from .files import parse_file
from .fuzzy import FuzzyClustering
from .plotting import plot_clusters, plot_fuzzy

_DEFAULT_DC = Path("..") / "Data" / "DC-Data4.txt"
_DEFAULT_DCN = Path("..") / "Data" / "DCN-Data4.txt"


def build_figure(dc: Data, dcn: Data, rng: random.Random | None = None) -> Figure:
    """Cluster both data sets and draw raw, crisp and fuzzy results on a 3x3 grid."""
    rng = rng if rng is not None else random.Random()
    crisp_dc = CrispClustering(dc, 2, 2)
    crisp_dcn = CrispClustering(dcn, 2, 5)
    fuzzy_runs = [
        (FuzzyClustering(dc, 2, 2, rng=rng), "dataSetDCFuzzy"),
        (FuzzyClustering(dcn, 3, 2, rng=rng), "dataSetDCNFuzzy clusters:3 fuzzyfactor: 2"),
        (FuzzyClustering(dcn, 2, 2, rng=rng), "dataSetDCNFuzzy clusters:2 fuzzyfactor: 2"),
        (FuzzyClustering(dcn, 3, 3, rng=rng), "dataSetDCNFuzzy clusters:3 fuzzyfactor: 3"),
        (FuzzyClustering(dcn, 3, 1.5, rng=rng), "dataSetDCNFuzzy clusters:3 fuzzyfactor: 1.5"),
    ]

    figure = plt.figure(figsize=(15, 12))
    axes = iter(figure.subplots(3, 3).flat)
    plot_clusters(next(axes), [dc], "DC raw data")
    plot_clusters(next(axes), [dcn], "DCN raw data")
    plot_clusters(next(axes), crisp_dc.clusters, "dataSetDCCrisp")
    plot_clusters(next(axes), crisp_dcn.clusters, "dataSetDCNCrisp")
    for clustering, title in fuzzy_runs:
        points, members, centers = clustering.get()
        plot_fuzzy(next(axes), points, members, centers, title)
    figure.tight_layout()
    return figure


def main(argv: Sequence[str] | None = None) -> int:
    """Read the two data files, cluster them and show or save the figure."""
    parser = argparse.ArgumentParser(
        prog="pointcluster", description="Crisp and fuzzy clustering of 2-D points."
    )
    parser.add_argument("dc", nargs="?", type=Path, default=_DEFAULT_DC)
    parser.add_argument("dcn", nargs="?", type=Path, default=_DEFAULT_DCN)
    parser.add_argument("-o", "--output", type=Path, help="save the figure instead of showing it")
    parser.add_argument("--seed", type=int, help="seed for the fuzzy initialisation")
    args = parser.parse_args(argv)

    try:
        dc = parse_file(args.dc)
        dcn = parse_file(args.dcn)
        figure = build_figure(dc, dcn, random.Random(args.seed))
    except (OSError, ValueError) as exc:
        print(f"pointcluster: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        figure.savefig(args.output)
        plt.close(figure)
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
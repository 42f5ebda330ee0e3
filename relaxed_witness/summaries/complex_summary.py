# relaxed_witness/summaries/complex_summary.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..complex.graph_utils import n_components


# ----------------------------
# Summary data container
# ----------------------------

@dataclass
class WitnessComplexSummary:
    """
    Pretty summary of a built witness complex: simplex counts per dimension,
    filtration ranges, 1-skeleton connectivity and how the active witness pool
    shrank from round to round.
    """
    n_landmarks: int
    n_witnesses: int
    alpha: float
    strategy: str
    dimension: int

    counts: Tuple[int, ...]                    # counts[d] = #d-simplices
    n_relaxed: int                             # simplices with filtration > 0
    n_components: int
    active_per_round: Tuple[int, ...] = ()     # active witnesses entering round d
    unwitnessed_landmarks: Tuple[int, ...] = ()

    filtrations: Optional[Dict[int, np.ndarray]] = None
    warnings: Tuple[str, ...] = ()

    # ----------------------------
    # formatting
    # ----------------------------

    def _filtration_range(self, d: int) -> Optional[Tuple[float, float]]:
        if self.filtrations is None:
            return None
        arr = self.filtrations.get(d)
        if arr is None or arr.size == 0:
            return None
        return float(arr.min()), float(arr.max())

    def to_text(self) -> str:
        lines: List[str] = []
        lines.append("Witness Complex Summary")
        lines.append(f"  n_landmarks = {self.n_landmarks}, n_witnesses = {self.n_witnesses}")
        lines.append(f"  alpha = {self.alpha:g}, strategy = {self.strategy}")

        lines.append("")
        lines.append("  simplex counts:")
        for d, c in enumerate(self.counts):
            rng = self._filtration_range(d)
            if rng is None:
                lines.append(f"    #( {d}-simplices ) = {c}")
            else:
                lines.append(f"    #( {d}-simplices ) = {c}   filtration in [{rng[0]:g}, {rng[1]:g}]")
        if self.dimension >= 0:
            lines.append(f"    no simplices in dimensions ≥ {self.dimension + 1}")
        lines.append(f"  relaxed simplices (filtration > 0) = {self.n_relaxed}")
        lines.append(f"  connected components of 1-skeleton = {self.n_components}")

        if self.active_per_round:
            lines.append("")
            lines.append("  active witnesses per round:")
            lines.append("    " + " -> ".join(str(a) for a in self.active_per_round))

        for w in self.warnings:
            lines.append("")
            lines.append(f"  WARNING: {w}")

        return "\n".join(lines)

    def to_markdown(self) -> str:
        md: List[str] = []
        md.append("### Witness Complex Summary")
        md.append(
            f"- $n_\\text{{landmarks}} = {self.n_landmarks}$, "
            f"$n_\\text{{witnesses}} = {self.n_witnesses}$, $\\alpha = {self.alpha:g}$"
        )
        md.append("")
        md.append("**Simplex Counts:**")
        md.append("")
        md.append("\n".join([f"- $\\#(\\text{{{d}-simplices}}) = {c}$" for d, c in enumerate(self.counts)]))
        md.append("")
        md.append(f"- Relaxed simplices: {self.n_relaxed}")
        md.append(f"- Connected components of the 1-skeleton: {self.n_components}")
        if self.active_per_round:
            md.append(
                "- Active witnesses per round: "
                + " $\\to$ ".join(str(a) for a in self.active_per_round)
            )

        if self.warnings:
            md.append("")
            md.append("**Warnings:**")
            md.append("")
            for w in self.warnings:
                md.append(f"- {w}")

        return "\n".join(md)

    # ----------------------------
    # rendering
    # ----------------------------

    def show_summary(self, *, show: bool = True, mode: str = "auto") -> str:
        """
        Display the summary.

        ``mode`` is one of "auto", "latex", "text", "both".
        """
        text = self.to_text()
        if not show:
            return text

        did_rich = False
        if mode in {"latex", "auto", "both"}:
            did_rich = _display_markdown(self)

        if mode == "both" or mode == "text" or (mode == "auto" and not did_rich):
            print("\n" + text + "\n")

        return text

    def plot_filtrations(
        self,
        *,
        bins: int = 30,
        dpi: int = 200,
        figsize: Optional[Tuple[float, float]] = None,
        save_path: Optional[str] = None,
        show: bool = True,
    ):
        return plot_filtration_histograms(
            self,
            bins=bins,
            dpi=dpi,
            figsize=figsize,
            save_path=save_path,
            show=show,
        )


def _display_markdown(summary: WitnessComplexSummary) -> bool:
    try:
        from IPython.display import display, Markdown  # type: ignore
    except Exception:
        return False
    try:
        display(Markdown(summary.to_markdown()))
        return True
    except Exception:
        return False


# ----------------------------
# Plot helper (histograms)
# ----------------------------

def plot_filtration_histograms(
    summary: WitnessComplexSummary,
    *,
    bins: int = 30,
    dpi: int = 200,
    figsize: Optional[Tuple[float, float]] = None,
    save_path: Optional[str] = None,
    show: bool = True,
):
    if summary.filtrations is None:
        raise ValueError("plot_filtrations requires a summary built with filtration values.")

    import matplotlib.pyplot as plt

    panels = [(d, arr) for d, arr in sorted(summary.filtrations.items()) if arr.size > 0]
    if len(panels) == 0:
        return None, None

    n = len(panels)
    if figsize is None:
        figsize = (4.5 * n, 3.5)

    fig, axes = plt.subplots(1, n, figsize=figsize, dpi=int(dpi), constrained_layout=True)
    axes_list = [axes] if n == 1 else list(axes)

    for ax, (d, arr) in zip(axes_list, panels):
        ax.hist(np.asarray(arr, dtype=float), bins=int(bins))
        ax.set_title(f"${d}$-Simplices ({arr.size})")
        ax.set_xlabel("Filtration value")
        ax.grid(True, axis="y", alpha=0.25)

    axes_list[0].set_ylabel("#Simplices")

    if save_path is not None:
        out = save_path
        if out.lower().endswith(".pdf"):
            out = out[:-4] + "_filtrations.pdf"
        else:
            out = out + "_filtrations.pdf"
        fig.savefig(out, format="pdf", bbox_inches="tight")

    if show:
        plt.show()

    return fig, (axes_list[0] if n == 1 else axes_list)


# ----------------------------
# Public API
# ----------------------------

def summarize_simplex_tree(
    st,
    *,
    n_landmarks: Optional[int] = None,
    n_witnesses: int = 0,
    alpha: float = 0.0,
    strategy: str = "",
    active_per_round: Tuple[int, ...] = (),
) -> WitnessComplexSummary:
    by_dim: Dict[int, List[float]] = {}
    for s, f in st.get_simplices():
        by_dim.setdefault(len(s) - 1, []).append(float(f))

    dimension = max(by_dim) if by_dim else -1
    counts = tuple(len(by_dim.get(d, [])) for d in range(dimension + 1))
    filtrations = {d: np.sort(np.asarray(v, dtype=float)) for d, v in by_dim.items()}
    n_relaxed = int(sum(int(np.sum(arr > 0.0)) for arr in filtrations.values()))

    vertices = {int(s[0]) for s, _ in st.get_skeleton(0)}
    nbL = (max(vertices) + 1 if vertices else 0) if n_landmarks is None else int(n_landmarks)
    unwitnessed = tuple(l for l in range(nbL) if l not in vertices)

    warnings: List[str] = []
    if unwitnessed:
        warnings.append(
            f"{len(unwitnessed)} of {nbL} landmarks are not a vertex of the complex "
            f"(no witness reached them)."
        )

    return WitnessComplexSummary(
        n_landmarks=int(nbL),
        n_witnesses=int(n_witnesses),
        alpha=float(alpha),
        strategy=str(strategy),
        dimension=int(dimension),
        counts=counts,
        n_relaxed=n_relaxed,
        n_components=int(n_components(st)),
        active_per_round=tuple(int(a) for a in active_per_round),
        unwitnessed_landmarks=unwitnessed,
        filtrations=filtrations,
        warnings=tuple(warnings),
    )


def summarize_witness_complex(
    result,
    *,
    verbose: bool = False,
    latex: str | bool = "auto",
) -> WitnessComplexSummary:
    """Summary of a :class:`~relaxed_witness.construction.builder.WitnessComplexResult`."""
    summ = summarize_simplex_tree(
        result.simplex_tree,
        n_landmarks=result.n_landmarks,
        n_witnesses=result.n_witnesses,
        alpha=result.alpha,
        strategy=result.strategy,
        active_per_round=tuple(r.n_active for r in result.rounds),
    )

    if verbose:
        mode = "auto" if latex == "auto" else ("latex" if latex is True else "text")
        summ.show_summary(show=True, mode=mode)

    return summ

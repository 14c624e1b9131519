"""Example: compare circle and spiral layouts and write a TikZ preview."""

from pathlib import Path

from spiderfy import LayoutParameters, compute_layout, generate_tikz_document, summarize


def main() -> None:
    for count in (4, 8, 9, 40):
        records = compute_layout(count)
        summary = summarize(records)
        print(
            f"{count:>3} markers: mode={summary.mode.value} "
            f"leg={summary.min_leg_length:.1f}..{summary.max_leg_length:.1f} "
            f"min_separation={summary.min_separation:.1f}"
        )

    tight = LayoutParameters(spiral_foot_separation=40, spiral_length_factor=3)
    records = compute_layout(40, tight)
    output = Path("spiral_preview.tex")
    output.write_text(generate_tikz_document(records, title="40 markers, tight spiral"), encoding="utf-8")
    print(f"TikZ document written to {output}")


if __name__ == "__main__":
    main()

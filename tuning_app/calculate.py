"""
Tuning App — Arrow Calculator CLI

Compute FOC, balance point, total weight, kinetic energy and momentum for
an arrow build, with hunting guideline advisories.

Usage:
    arrow-tune
    arrow-tune --config tuning_app/configs/heavy_hunting.yaml
    arrow-tune --tip-weight 125 --insert-weight 50 --speed 270
    arrow-tune --diameter-mm 5.5 --vane-count 4 --json
    arrow-tune --plot balance.png --strict
"""

import argparse
import json
import math
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for saving plots
import matplotlib.pyplot as plt
from rich.console import Console
from rich.table import Table

from arrow_engine.advisories import ArrowAssessment, assess_arrow
from arrow_engine.components import ArrowConfiguration, ArrowMetrics
from arrow_engine.metrics import InvalidArrowConfiguration, format_metrics, validate_arrow_configuration
from tuning_app.setup_form import ArrowSetupForm
from tuning_app.setup_loader import load_setup

console = Console()

# CLI flag -> form field path
OVERRIDE_FLAGS = {
    "shaft_length": "shaft.length",
    "linear_weight": "shaft.linear_weight",
    "diameter_mm": "shaft.diameter_mm",
    "material": "shaft.material",
    "tip_type": "tip.type",
    "tip_weight": "tip.weight",
    "insert_weight": "insert.weight",
    "vane_type": "vanes.type",
    "vane_weight": "vanes.weight_per_vane",
    "vane_count": "vanes.count",
    "nock_weight": "nock.weight",
    "draw_weight": "bow.draw_weight",
    "draw_length": "bow.draw_length",
    "speed": "bow.arrow_speed",
}

GUIDELINES = {
    "foc": "Ideal for hunting: 10-15%",
    "total_weight": "Hunting: 400-500gr | Target: 300-400gr",
    "kinetic_energy": "Small game: 25+ | Deer: 40+ | Elk: 60+",
    "momentum": "Higher values = better penetration",
    "balance_point": "Inches from tip",
}


def build_form(config_path: Path = None, overrides: dict = None) -> ArrowSetupForm:
    """Load a setup and apply command-line overrides as form edits."""
    form = ArrowSetupForm(load_setup(config_path))
    for field, value in (overrides or {}).items():
        form.edit(field, value)
    return form


def results_table(metrics: ArrowMetrics) -> Table:
    display = format_metrics(metrics)

    table = Table(title="Arrow Performance Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="bold", no_wrap=True)
    table.add_column("Guideline", style="dim")

    table.add_row("FOC (Front of Center)", f"{display['foc']}%", GUIDELINES["foc"])
    table.add_row("Total Arrow Weight", f"{display['total_weight']} grains", GUIDELINES["total_weight"])
    table.add_row("Kinetic Energy", f"{display['kinetic_energy']} ft-lbs", GUIDELINES["kinetic_energy"])
    table.add_row("Momentum", display["momentum"], GUIDELINES["momentum"])
    table.add_row("Balance Point", f"{display['balance_point']}\"", GUIDELINES["balance_point"])
    return table


def plot_balance_point(config: ArrowConfiguration, metrics: ArrowMetrics, output_path: Path) -> Path:
    """Save a side view of the shaft marking the balance point and midpoint.

    Returns:
        Path of the saved image.
    """
    length = config.shaft.length
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 1.8))
    if math.isfinite(length):
        ax.barh(0, length, height=0.4, color="lightgray", edgecolor="gray")
        ax.axvline(length / 2, color="blue", linewidth=2, label="Center")
        ax.set_xlim(min(0.0, length), max(0.0, length))
        ax.text(length, -0.45, "Nock", ha="right", va="top", fontsize=8)
    if math.isfinite(metrics.balance_point):
        ax.axvline(metrics.balance_point, color="red", linewidth=2, label="Balance point")

    ax.set_yticks([])
    ax.set_xlabel("Inches from tip")
    ax.set_title(f"Balance: {format_metrics(metrics)['balance_point']}\" from tip | Shaft Length: {length}\"")
    ax.text(0, -0.45, "Tip", ha="left", va="top", fontsize=8)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="upper right", fontsize=8)

    fig.tight_layout()
    fig.savefig(output_path, dpi=120)
    plt.close(fig)
    return output_path


def assessment_payload(assessment: ArrowAssessment) -> dict:
    return {
        "foc": assessment.foc.value,
        "weight": assessment.weight.value,
        "game": assessment.game.value,
        "messages": list(assessment.messages),
    }


def report(form: ArrowSetupForm, as_json: bool = False) -> dict:
    """Print metrics and advisories for the form's current build."""
    metrics = form.metrics
    assessment = assess_arrow(metrics)
    payload = {
        "metrics": format_metrics(metrics),
        "assessment": assessment_payload(assessment),
        "out_of_range": [field for field, _, _ in form.out_of_range()],
    }

    if as_json:
        console.print_json(json.dumps(payload))
        return payload

    console.print()
    console.print(results_table(metrics))
    for message in assessment.messages:
        console.print(f"  [yellow]⚠ {message}[/yellow]")
    console.print(
        f"  Weight class: [cyan]{assessment.weight.value}[/cyan]  "
        f"Game: [cyan]{assessment.game.value}[/cyan]"
    )
    for field, value, bounds in form.out_of_range():
        console.print(
            f"  [yellow]⚠ {field} = {value:g} is outside the usual "
            f"{bounds.minimum:g}-{bounds.maximum:g} range[/yellow]"
        )
    console.print(
        f"  Balance: {payload['metrics']['balance_point']}\" from tip | "
        f"Shaft Length: {form.config.shaft.length:g}\"\n"
    )
    return payload


# ---------- CLI ----------
def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Arrow tuning calculator (FOC, weight, KE, momentum)")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML arrow setup (default: tuning_app/configs/default_setup.yaml)")
    parser.add_argument("--shaft-length", type=str, help="Shaft length (inches)")
    parser.add_argument("--linear-weight", type=str, help="Shaft weight (grains per inch)")
    parser.add_argument("--diameter-mm", type=str, help="Shaft diameter (mm)")
    parser.add_argument("--material", type=str, help="Shaft material label")
    parser.add_argument("--tip-type", type=str, help="Tip/broadhead type label")
    parser.add_argument("--tip-weight", type=str, help="Tip weight (grains)")
    parser.add_argument("--insert-weight", type=str, help="Insert weight (grains)")
    parser.add_argument("--vane-type", type=str, help="Vane type label")
    parser.add_argument("--vane-weight", type=str, help="Weight per vane (grains)")
    parser.add_argument("--vane-count", type=str, help="Number of vanes (2-4)")
    parser.add_argument("--nock-weight", type=str, help="Nock weight (grains)")
    parser.add_argument("--draw-weight", type=str, help="Draw weight (lbs)")
    parser.add_argument("--draw-length", type=str, help="Draw length (inches)")
    parser.add_argument("--speed", type=str, help="Arrow speed (fps)")
    parser.add_argument("--json", action="store_true",
                        help="Print results as JSON")
    parser.add_argument("--plot", type=str, default=None,
                        help="Save a balance point chart to this path")
    parser.add_argument("--strict", action="store_true",
                        help="Reject builds with non-positive shaft length or total weight")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    overrides = {
        field: getattr(args, flag)
        for flag, field in OVERRIDE_FLAGS.items()
        if getattr(args, flag) is not None
    }

    try:
        form = build_form(Path(args.config) if args.config else None, overrides)
        if args.strict:
            validate_arrow_configuration(form.config)
    except InvalidArrowConfiguration as e:
        console.print(f"[red]Invalid arrow: {e}[/red]")
        return 1
    except (OSError, ValueError, KeyError) as e:
        console.print(f"[red]Could not build arrow setup: {e}[/red]")
        return 1

    report(form, as_json=args.json)

    if args.plot:
        plot_path = plot_balance_point(form.config, form.metrics, Path(args.plot))
        if not args.json:
            console.print(f"  📊 Plot saved: {plot_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

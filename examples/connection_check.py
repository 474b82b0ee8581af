"""End-to-end connection example: build the model, evaluate, plot.

Outputs (created under `gallery/connection/`):
- 01_setup.txt
- 02_evaluation.txt
- 03_unresolved.txt
- bolt_pattern.svg
- capacity_summary.svg
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # non-interactive backend for scripts/CI

from boltcheck import (
    BoltConfiguration,
    ConnectionEvaluator,
    EntityStore,
    EvaluationError,
    EvaluationResult,
    GlobalLoads,
    Member,
    plot_bolt_configuration,
    plot_capacity_summary,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _out_dir() -> Path:
    out_dir = _project_root() / "gallery" / "connection"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def _write_text(path: Path, text: str) -> None:
    path.write_text(text.rstrip() + "\n", encoding="utf-8")
    print(f"Saved: {path}")


def _format_setup(store: EntityStore) -> str:
    lines: list[str] = []
    lines.append("CONNECTION EXAMPLE - SETUP")
    lines.append("=" * 80)
    lines.append("Units: kip, in, ksi")
    lines.append("")
    lines.append("Members:")
    for member in store.members:
        lines.append(f"  {member.id}: {member.name} [{member.kind}, {member.material}]")
    lines.append("Bolt configurations:")
    for config in store.bolt_configurations:
        lines.append(
            f"  {config.id}: {config.name} {config.n_rows} x {config.n_columns}, "
            f"d={config.bolt_diameter}\" {config.bolt_grade}"
        )
    lines.append("Global loads:")
    for loads in store.global_loads:
        lines.append(
            f"  {loads.id}: {loads.name} F=({loads.Fx}, {loads.Fy}, {loads.Fz}) kip, "
            f"M=({loads.Mx}, {loads.My}, {loads.Mz}) kip-in, direct={loads.direct_load} kip"
        )
    lines.append("Connections:")
    for connection in store.connections:
        lines.append(f"  {connection.id}: {connection.label}")
    return "\n".join(lines)


def _format_result(result: EvaluationResult) -> str:
    lines: list[str] = []
    lines.append("CONNECTION EVALUATION")
    lines.append("=" * 80)
    for key, value in result.info.items():
        if key == "plies":
            continue
        if isinstance(value, float):
            lines.append(f"{key:<28} {value:12.3f}")
        else:
            lines.append(f"{key:<28} {value}")
    lines.append("")
    for ply in (result.ply_a, result.ply_b):
        lines.append(
            f"Ply {ply.side}: {ply.member_name} ({ply.component}) t={ply.thickness:.3f} in, "
            f"bearing={ply.bearing_capacity:.2f} kip, block shear={ply.block_shear_capacity:.2f} kip"
        )
    return "\n".join(lines)


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    out_dir = _out_dir()

    store = EntityStore()
    beam = store.add_member(Member.steel_section("W21X83", role="BEAM"))
    plate = store.add_member(Member.plate(thickness=0.5, width=10.0))
    bolts = store.add_bolt_configuration(BoltConfiguration())
    loads = store.add_global_loads(GlobalLoads(direct_load=150.0))
    conn = store.add_connection(beam, plate, bolts, loads, component_a="WEB")

    _write_text(out_dir / "01_setup.txt", _format_setup(store))

    evaluator = ConnectionEvaluator(store)
    result = evaluator.evaluate(conn)
    _write_text(out_dir / "02_evaluation.txt", _format_result(result))

    plot_bolt_configuration(
        store.get_bolt_configuration(bolts),
        show=False,
        save_path=out_dir / "bolt_pattern.svg",
        hole_allowance=evaluator.settings.hole_allowance,
    )
    plot_capacity_summary(result, show=False, save_path=out_dir / "capacity_summary.svg")

    # A removed bolt configuration makes the connection impossible to evaluate.
    store.remove_bolt_configuration(bolts)
    try:
        evaluator.evaluate(conn)
    except EvaluationError as exc:
        _write_text(out_dir / "03_unresolved.txt", f"Cannot evaluate {conn}: {exc}")


if __name__ == "__main__":
    run()

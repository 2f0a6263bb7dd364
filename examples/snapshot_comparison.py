"""Capture the baseline setup and compare a DRS-open variant against it."""

from __future__ import annotations

import logging
from dataclasses import replace

from aerosim import SimulationParameters, SnapshotSlot, evaluate
from aerosim.utils import configure_logging


def main() -> None:
    """Save a baseline snapshot and log the change caused by opening DRS."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("snapshot_comparison_example")

    baseline = SimulationParameters()
    slot = SnapshotSlot()
    slot.save(baseline, evaluate(baseline))

    drs_open = replace(baseline, drs_open=True)
    delta = slot.diff(evaluate(drs_open))
    if delta is None:
        logger.info("No snapshot stored")
        return
    logger.info("Delta downforce: %+.2f kN", delta.downforce_kn)
    logger.info("Delta drag: %+.2f kN", delta.drag_kn)


if __name__ == "__main__":
    main()

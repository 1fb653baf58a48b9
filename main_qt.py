# main_qt.py
import argparse
import locale
import logging
import sys

from PySide6.QtCore import QCoreApplication, QTimer

from infra.config import SimulationSettings
from infra.logging_config import setup_logging
from infra.qt_scheduler import QtTimerScheduler
from infra.services import build_service_graph

logger = logging.getLogger("govtrack")


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Run the GovTrack live simulation headless.")
    parser.add_argument("--duration", type=float, default=0.0, help="seconds to run before quitting (0 = forever)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging()
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.warning("System collation locale unavailable; sorting with the default locale")

    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    services = build_service_graph(SimulationSettings.from_env(), scheduler=QtTimerScheduler(app))

    def on_tick(result):
        snap = services.metrics.snapshot()
        logger.info(
            "Tick %d: %d budget(s), %d project(s) changed; utilization=%s transparency=%d",
            result.tick,
            len(result.budget_ids),
            len(result.project_ids),
            "n/a" if snap.overall_utilization is None else f"{snap.overall_utilization:.1f}%",
            snap.transparency_index,
        )

    services.events.simulation_ticked.connect(on_tick)
    services.ticker.start()
    app.aboutToQuit.connect(services.ticker.stop)

    if args.duration > 0:
        QTimer.singleShot(int(args.duration * 1000), app.quit)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

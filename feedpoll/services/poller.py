import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from feedpoll.analysis.summarize import analyze
from feedpoll.core.config import PollerConfig
from feedpoll.core.errors import StageError
from feedpoll.fetch.base import BaseFetcher
from feedpoll.fetch.utils import display_time, now_local
from feedpoll.notify.base import BaseNotifier
from feedpoll.report.writer import ReportFile, write_report
from feedpoll.storage.files import StoredFile, ensure_dirs, persist

FETCH_OK_TITLE = "Data Fetch Successful"
FETCH_FAILED_TITLE = "Data Fetch Failed"
ANALYSIS_OK_TITLE = "Analysis Complete"
ANALYSIS_FAILED_TITLE = "Analysis Failed"
ITERATION_FAILED_TITLE = "Iteration Failed"

@dataclass
class IterationOutcome:
    started_at: datetime
    stored: Optional[StoredFile] = None
    report: Optional[ReportFile] = None
    error: Optional[StageError] = None
    finished_at: Optional[datetime] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.report is not None

class Poller:
    """
    Fetch -> persist -> analyze -> report, once per tick.

    run_once() performs a single iteration and never raises for stage
    failures; run_forever() repeats it with a fixed pause until the stop
    event is set.
    """

    def __init__(self, config: PollerConfig, fetcher: BaseFetcher, notifier: BaseNotifier):
        self.config = config
        self.fetcher = fetcher
        self.notifier = notifier
        self._prepared = False

    def prepare(self) -> None:
        if not self._prepared:
            ensure_dirs([self.config.data_dir, self.config.analysis_dir])
            self._prepared = True

    def run_once(self) -> IterationOutcome:
        self.prepare()
        outcome = IterationOutcome(started_at=now_local())

        print("\n========================================")
        print("Starting data fetch")
        print(f"Time: {display_time(outcome.started_at)}")
        print("========================================\n")

        # Step 1: fetch + save
        print(f"Fetching data from: {self.config.url}")
        fetched = self.fetcher.fetch(self.config.url)
        if not isinstance(fetched, StageError):
            fetched = persist(fetched.content, fetched.captured_at, self.config.data_dir, self.config.data_extension)

        if isinstance(fetched, StageError):
            print(f"Error fetching data: {fetched}")
            self.notifier.notify(FETCH_FAILED_TITLE, f"Failed to fetch data. Error: {fetched}")
            return self._finish(outcome, error=fetched)

        outcome.stored = fetched
        print(f"Data saved to: {fetched.path}")
        self.notifier.notify(FETCH_OK_TITLE, f"Data successfully fetched and saved to: {fetched.path}")

        # Step 2: analyze + report
        report = analyze(fetched)
        if not isinstance(report, StageError):
            print(f"Number of rows: {report.row_count}")
            print(f"Number of columns: {report.column_count}")
            print(f"Column names: {', '.join(report.column_names)}")
            report = write_report(report, fetched, self.config.analysis_dir)

        if isinstance(report, StageError):
            print(f"Error analyzing data: {report}")
            self.notifier.notify(
                ANALYSIS_FAILED_TITLE,
                f"Analysis of {fetched.path} failed. Error: {report}",
            )
            return self._finish(outcome, error=report)

        outcome.report = report
        print(f"Analysis saved to: {report.path}")
        self.notifier.notify(ANALYSIS_OK_TITLE, f"Analysis completed. Report saved to: {report.path}")
        return self._finish(outcome)

    def _finish(self, outcome: IterationOutcome, error: Optional[StageError] = None) -> IterationOutcome:
        outcome.error = error
        outcome.finished_at = now_local()
        return outcome

    def run_forever(self, stop: Optional[threading.Event] = None) -> None:
        """
        Run one iteration immediately, then one every interval_seconds,
        measured from the end of the previous iteration.
        Returns once stop is set.
        """
        stop = stop or threading.Event()
        self.prepare()

        print("\n========================================")
        print("Starting continuous monitoring")
        print(f"Fetching data every {self.config.interval_seconds:g} seconds")
        print("Press Ctrl+C to stop")
        print("========================================\n")

        while not stop.is_set():
            try:
                self.run_once()
            except Exception as e:
                print(f"Unexpected error during iteration: {type(e).__name__}: {e}")
                self.notifier.notify(ITERATION_FAILED_TITLE, f"Unexpected error: {type(e).__name__}: {e}")
            if stop.wait(self.config.interval_seconds):
                break

        print("Monitoring stopped")

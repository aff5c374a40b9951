"""Line ending and indentation statistics for source trees.

Modules:
- classify.py: Streaming byte classifier (binary, EOL and indentation).
- fs_scan.py: Recursive directory walk feeding the classifier.
- aggregate.py: Folding per-file verdicts into run statistics.
- model.py: Verdict, statistics and result models.
- report.py: Plain-text summary of the statistics.
- log.py: Logging setup for the command line.
"""

__all__ = [
	"classify",
	"fs_scan",
	"aggregate",
	"model",
	"report",
	"log",
]

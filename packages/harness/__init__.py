from .core import SolveResult, solve, run_batch, read_puzzles
from .io import write_csv, write_json, write_manifest
from .report import Palette, PLAIN, ANSI, format_report, print_report

__all__ = ["SolveResult", "solve", "run_batch", "read_puzzles",
           "write_csv", "write_json", "write_manifest",
           "Palette", "PLAIN", "ANSI", "format_report", "print_report"]

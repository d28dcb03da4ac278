"""Application Commands."""

from waste_guide.application.commands.analyze_scan_command import AnalyzeScanCommand
from waste_guide.application.commands.find_best_match_command import FindBestMatchCommand

__all__ = ["AnalyzeScanCommand", "FindBestMatchCommand"]

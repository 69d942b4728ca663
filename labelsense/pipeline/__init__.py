"""
Scan Pipeline Module

Async, single-shot entry points over the label understanding stages.
"""

from labelsense.pipeline.scan_service import LabelScanService

__all__ = ["LabelScanService"]

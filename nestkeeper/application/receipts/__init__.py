"""Receipt workflows."""

from nestkeeper.application.receipts.scan import PipelineState, coerce_ocr_output, extract_receipt

__all__ = [
    "PipelineState",
    "coerce_ocr_output",
    "extract_receipt",
]

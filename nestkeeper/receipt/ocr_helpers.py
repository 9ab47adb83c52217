"""Pure OCR transformation helpers used before and after the OCR call."""

import io
from typing import Any

from nestkeeper.domain.receipt import OCRText

MAX_IMAGE_DIMENSION = 3000  # Resize if either dimension exceeds this
OCR_IMAGE_PADDING = 50  # White padding around image to prevent edge truncation

MIN_DETECTION_CONFIDENCE = 0.5
LINE_Y_THRESHOLD = 20.0  # Max center distance (pixels) for two detections on one line


def resize_image_bytes(
    image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION, padding: int = OCR_IMAGE_PADDING
) -> bytes:
    """Downscale an upload so its long side is at most max_dimension, pad it white and re-encode as JPEG."""
    from PIL import Image, ImageOps

    img = Image.open(io.BytesIO(image_bytes))

    # Phone photos carry their rotation in EXIF
    img = ImageOps.exif_transpose(img)

    width, height = img.size

    if width <= max_dimension and height <= max_dimension:
        img_final = img
    else:
        if width > height:
            new_width = max_dimension
            new_height = int(height * (max_dimension / width))
        else:
            new_height = max_dimension
            new_width = int(width * (max_dimension / height))

        img_final = img.resize((new_width, new_height), Image.Resampling.LANCZOS)

    if padding > 0:
        img_final = ImageOps.expand(img_final, border=padding, fill="white")

    buffer = io.BytesIO()
    img_final.convert("RGB").save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def _group_into_lines(detections: list[dict[str, Any]], y_threshold: float) -> list[list[dict[str, Any]]]:
    """Group detections sorted by center_y into reading-order lines."""
    lines: list[list[dict[str, Any]]] = []
    for det in detections:
        if lines:
            current = lines[-1]
            line_center = sum(d["center_y"] for d in current) / len(current)
            if abs(det["center_y"] - line_center) <= y_threshold:
                current.append(det)
                continue
        lines.append([det])

    for line in lines:
        line.sort(key=lambda d: d["min_x"])
    return lines


def flatten_ocr_detections(
    raw_result: dict[str, Any],
    min_confidence: float = MIN_DETECTION_CONFIDENCE,
    y_threshold: float = LINE_Y_THRESHOLD,
) -> OCRText:
    """
    Flatten an OCR service response into plain text plus a 0-100 confidence.

    The response carries ``detections`` as ``[bbox, [text, confidence]]`` where
    bbox is four ``[x, y]`` points and confidence is in [0, 1]. Detections are
    grouped into lines by vertical position and joined left to right.

    Raises:
        ValueError: if a detection does not have the expected shape.
    """
    detections = raw_result.get("detections", [])
    if not detections:
        return OCRText(text="", confidence=0)

    detection_data: list[dict[str, Any]] = []
    for detection in detections:
        try:
            bbox, (text, confidence) = detection
            y_coords = [float(point[1]) for point in bbox]
            min_x = min(float(point[0]) for point in bbox)
        except (TypeError, ValueError, IndexError) as exc:
            raise ValueError(f"Unexpected OCR detection shape: {detection!r}") from exc

        if float(confidence) < min_confidence or not str(text).strip():
            continue

        detection_data.append(
            {
                "text": str(text).strip(),
                "confidence": float(confidence),
                "center_y": sum(y_coords) / len(y_coords),
                "min_x": min_x,
            }
        )

    if not detection_data:
        return OCRText(text="", confidence=0)

    detection_data.sort(key=lambda d: (d["center_y"], d["min_x"]))
    lines = _group_into_lines(detection_data, y_threshold)

    full_text = "\n".join(" ".join(d["text"] for d in line) for line in lines)
    mean_confidence = sum(d["confidence"] for d in detection_data) / len(detection_data)
    return OCRText(text=full_text, confidence=round(mean_confidence * 100))

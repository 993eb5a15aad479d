from __future__ import annotations

import logging
import string
from typing import Any, Mapping

from coloraide import Color
from flask import Flask, jsonify, request

from .dynamiccolor import DynamicScheme, Platform, SpecVersion, Variant
from .hct import Hct
from .palettes import CorePalettes
from .quantize import quantizer_celebi
from .score import score
from .utils.image_utils import source_color_from_image_bytes
from .utils.math_utils import clamp_int, round_half_up
from .utils.string_utils import hex_from_argb

log = logging.getLogger(__name__)

DEFAULT_SEED = "#6750a4"
DEFAULT_TONES = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)
FIT_METHOD = "raytrace"  # consistent gamut-fit for CSS input
MAX_QUANTIZE_COLORS = 256

TRUTHY = {"1", "true", "yes", "on", "dark"}


def parse_seed(val: str | None) -> int:
    """Any CSS colour string to opaque ARGB, gamut-fitted into sRGB."""
    raw = (val or DEFAULT_SEED).strip()
    # bare hex digits as sent by <input type=color> without the '#'
    if len(raw) in (3, 6, 8) and all(c in string.hexdigits for c in raw):
        raw = "#" + raw
    try:
        color = Color(raw)
    except ValueError as exc:
        raise ValueError(f"invalid color: {raw!r}") from exc
    srgb = color.convert("srgb").fit(method=FIT_METHOD)
    r, g, b = (clamp_int(0, 255, round_half_up(v * 255.0)) for v in srgb.coords())
    return 0xFF000000 | (r << 16) | (g << 8) | b


def parse_variant(val: str | None) -> Variant:
    name = (val or "tonal_spot").strip().upper().replace("-", "_")
    try:
        return Variant[name]
    except KeyError:
        raise ValueError(f"unknown variant '{val}'") from None


def parse_platform(val: str | None) -> Platform:
    name = (val or "phone").strip().upper()
    try:
        return Platform[name]
    except KeyError:
        raise ValueError(f"unknown platform '{val}'") from None


def parse_contrast(val: str | None) -> float:
    try:
        level = float(val or 0.0)
    except ValueError:
        raise ValueError("contrast must be a number") from None
    if not -1.0 <= level <= 1.0:
        raise ValueError("contrast must be within [-1, 1]")
    return level


def parse_tones(val: str | None) -> tuple[int, ...]:
    if not val:
        return DEFAULT_TONES
    try:
        tones = tuple(int(t) for t in val.split(",") if t.strip())
    except ValueError:
        raise ValueError("tones must be comma-separated integers") from None
    if not all(0 <= t <= 100 for t in tones):
        raise ValueError("tones must be within [0, 100]")
    return tones


def scheme_from_args(args: Mapping[str, str]) -> DynamicScheme:
    return DynamicScheme.from_(
        source_color_hct=Hct.from_int(parse_seed(args.get("seed"))),
        variant=parse_variant(args.get("variant")),
        is_dark=(args.get("dark") or "").strip().lower() in TRUTHY,
        contrast_level=parse_contrast(args.get("contrast")),
        platform=parse_platform(args.get("platform")),
        spec_version=SpecVersion((args.get("spec") or "2021").strip()),
    )


def scheme_payload(scheme: DynamicScheme) -> dict[str, Any]:
    return {
        "scheme": str(scheme),
        "seed": hex_from_argb(scheme.source_color_argb),
        "colors": {name: hex_from_argb(argb) for name, argb in scheme.to_dict().items()},
    }


def palette_payload(scheme: DynamicScheme, tones: tuple[int, ...]) -> dict[str, dict[str, str]]:
    palettes = CorePalettes.from_scheme(scheme).items() + [("error", scheme.error_palette)]
    return {
        name: {str(t): hex_from_argb(palette.tone(t)) for t in tones} for name, palette in palettes
    }


def quantize_payload(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise ValueError("expected a JSON object")
    pixels = body.get("pixels")
    if not isinstance(pixels, list) or not all(
        isinstance(p, int) and 0 <= p <= 0xFFFFFFFF for p in pixels
    ):
        raise ValueError("pixels must be a list of 32-bit ARGB integers")
    max_colors = body.get("max_colors", 128)
    desired = body.get("desired", 4)
    if not isinstance(max_colors, int) or not 1 <= max_colors <= MAX_QUANTIZE_COLORS:
        raise ValueError(f"max_colors must be an integer in [1, {MAX_QUANTIZE_COLORS}]")
    if not isinstance(desired, int) or desired < 1:
        raise ValueError("desired must be a positive integer")

    population = quantizer_celebi.quantize(pixels, max_colors)
    ranked = score(population, desired=desired)
    return {
        "colors": [hex_from_argb(argb) for argb in ranked],
        "population": {hex_from_argb(argb): count for argb, count in population.items()},
    }


# ----------------------------- Flask app ----------------------------------


def create_app() -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    @app.route("/scheme")
    def scheme():
        try:
            s = scheme_from_args(request.args)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        try:
            payload = scheme_payload(s)
        except Exception as exc:
            log.exception("Scheme resolution failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(payload)

    @app.route("/palette")
    def palette():
        try:
            s = scheme_from_args(request.args)
            tones = parse_tones(request.args.get("tones"))
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        try:
            payload = palette_payload(s, tones)
        except Exception as exc:
            log.exception("Palette generation failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(payload)

    @app.route("/quantize", methods=["POST"])
    def quantize():
        try:
            payload = quantize_payload(request.get_json(silent=True))
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:
            log.exception("Quantization failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(payload)

    @app.route("/source-color", methods=["POST"])
    def source_color():
        data = request.get_data()
        if len(data) < 4:
            return jsonify({"error": "expected raw RGBA bytes"}), 400
        try:
            argb = source_color_from_image_bytes(data)
        except Exception as exc:
            log.exception("Source colour extraction failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify({"seed": hex_from_argb(argb)})

    return app


__all__ = ["create_app", "parse_seed", "scheme_from_args"]

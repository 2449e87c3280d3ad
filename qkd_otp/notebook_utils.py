"""Utility functions for exploring the QKD encryption demo in a notebook."""

from typing import Any, Dict, List, Optional

import numpy as np
import matplotlib.pyplot as plt
from IPython.display import HTML

from .bb84_protocol import BB84Sifter
from .randomness import RandomSource
from .results import EncryptOk, EncryptResult


COLLAPSE_THRESHOLD_BITS = 200


def needs_collapse(message_bits: int, threshold: int = COLLAPSE_THRESHOLD_BITS) -> bool:
    """Long outputs are shown truncated until expanded."""
    return message_bits > threshold


def format_key_preview(key: str, limit: int = 64) -> str:
    """Format a key string with ellipsis if too long."""
    if not key:
        return "-"
    if len(key) <= limit:
        return key
    head = max(limit // 2, 1)
    tail = max(limit - head - 3, 0)
    if tail <= 0:
        return key[:limit]
    return key[:head] + "..." + key[-tail:]


def encryption_summary(result: EncryptResult, limit: int = 64) -> HTML:
    """Render an encryption result as a small preformatted block."""
    if not isinstance(result, EncryptOk):
        if not result.message:
            return HTML("")
        return HTML(f"<p><strong>Error:</strong> {result.message}</p>")

    collapse = needs_collapse(result.message_bits)
    preview = (lambda text: format_key_preview(text, limit)) if collapse else (lambda text: text)
    lines = [
        "QKD ENCRYPTION",
        "------------------------------------------",
        f"Raw bits      : {result.raw_count}",
        f"Sifted bits   : {result.sifted_count} (~{result.kept_fraction * 100:.1f}% kept)",
        f"Usable key    : {result.usable_key_bytes} byte(s)",
        f"Key           : {preview(result.key_used_bits) or '-'}",
        f"Ciphertext    : {preview(result.ciphertext_bits) or '-'}",
        f"Sifted key    : {preview(result.full_sifted_key_bits) or '-'}",
        f"Plaintext     : {preview(result.plaintext_bits) or '-'}",
        f"Alice bits    : {format_key_preview(result.sender_bits_debug, limit)}",
        f"Alice bases   : {format_key_preview(result.sender_bases_debug, limit)}",
        f"Bob bases     : {format_key_preview(result.receiver_bases_debug, limit)}",
    ]
    return HTML("<pre>" + "\n".join(lines) + "</pre>")


def sweep_sifting_ratio(
    raw_bits: int,
    trials: int,
    source: Optional[RandomSource] = None,
) -> Dict[str, Any]:
    """Run ``trials`` independent exchanges and collect the kept ratio of each."""
    if raw_bits <= 0 or trials <= 0:
        raise ValueError("raw_bits and trials must be positive")
    sifter = BB84Sifter(source)
    ratios: List[float] = []
    for _ in range(trials):
        exchange = sifter.exchange(raw_bits)
        ratios.append(len(sifter.sift_exchange(exchange)) / raw_bits)
    values = np.asarray(ratios)
    return {
        "raw_bits": raw_bits,
        "trials": trials,
        "mean": float(values.mean()),
        "std": float(values.std()),
        "min": float(values.min()),
        "max": float(values.max()),
        "ratios": ratios,
    }


def render_sifting_curve(raw_sizes: List[int], trials: int, source: Optional[RandomSource] = None):
    """Plot the mean kept ratio (with one standard deviation) against raw exchange size."""
    if not raw_sizes:
        return None
    data = [sweep_sifting_ratio(size, trials, source) for size in raw_sizes]
    means = [item["mean"] for item in data]
    stds = [item["std"] for item in data]
    fig, ax = plt.subplots(figsize=(6, 3.5))
    ax.errorbar(raw_sizes, means, yerr=stds, marker="o", color="#1f77b4", label="Kept ratio")
    ax.axhline(0.5, color="#2e7d32", linestyle="--", label="Expected 0.5")
    ax.set_xscale("log")
    ax.set_xlabel("Raw bits exchanged")
    ax.set_ylabel("Sifted / raw")
    ax.grid(alpha=0.25)
    ax.legend(loc="upper right")
    plt.tight_layout()
    return fig

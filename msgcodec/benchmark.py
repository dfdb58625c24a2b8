"""Benchmark: encode and decode random payloads through every enabled codec."""

import argparse
import logging
import random
import time
from dataclasses import dataclass, replace

from msgcodec.bootstrap import build_registry
from msgcodec.config import parse_codecs, load_codec_config
from msgcodec.envelope import Envelope
from msgcodec.errors import CodecError
from msgcodec.registry import CODEC_NONE, CodecRegistry

logger = logging.getLogger(__name__)

DATASET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
PAYLOAD_SIZES = (1024, 4096, 8192, 16384)


@dataclass
class BenchmarkResult:
    codec: str
    payload_size: int
    compressed_size: int
    ratio: float
    time_ms: float


def random_payload(size: int, rng: random.Random | None = None) -> bytes:
    rng = rng or random.Random()
    return "".join(rng.choice(DATASET) for _ in range(size)).encode("ascii")


def bench_codec(
    registry: CodecRegistry, code: int, payload: bytes, iterations: int = 100
) -> BenchmarkResult:
    """Run *iterations* encode/decode round-trips and check each one."""
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    envelope = Envelope(value=payload, codec=code)
    encoded = envelope
    start = time.monotonic()
    for _ in range(iterations):
        encoded = envelope.encode(registry)
        decoded = encoded.decode(registry)
        if decoded.value != payload:
            raise CodecError(f"codec {code} did not round-trip a {len(payload)}-byte payload")
    elapsed_ms = (time.monotonic() - start) * 1000

    compressed_size = len(encoded.value)
    codec = registry.lookup(code)
    return BenchmarkResult(
        codec=codec.name if codec else "none",
        payload_size=len(payload),
        compressed_size=compressed_size,
        ratio=len(payload) / compressed_size if compressed_size > 0 else 1.0,
        time_ms=elapsed_ms / iterations,
    )


def run_benchmark(
    registry: CodecRegistry,
    iterations: int = 100,
    sizes=PAYLOAD_SIZES,
    seed: int | None = None,
) -> list[BenchmarkResult]:
    rng = random.Random(seed)
    payloads = {size: random_payload(size, rng) for size in sizes}
    results = []
    for code in [CODEC_NONE] + registry.codes():
        for size in sizes:
            results.append(bench_codec(registry, code, payloads[size], iterations))
    return results


def format_results(results: list[BenchmarkResult]) -> str:
    lines = [
        f"{'Codec':<10} {'Payload':<10} {'Compressed':<12} {'Ratio':<8} {'Time (ms)':<10}",
        "-" * 52,
    ]
    for r in results:
        lines.append(
            f"{r.codec:<10} {r.payload_size:<10,} {r.compressed_size:<12,} "
            f"{r.ratio:<8.2f} {r.time_ms:<10.3f}"
        )
    return "\n".join(lines)


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(description="Envelope compression benchmark")
    parser.add_argument("--config", type=str, default=None, help="YAML codec config")
    parser.add_argument("--codecs", type=str, default=None, help="comma-separated codec names")
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    config = load_codec_config(args.config)
    if args.codecs is not None:
        config = replace(config, codecs=parse_codecs(args.codecs))
    registry = build_registry(config)

    logger.info("Running %d iteration(s) per codec and payload size", args.iterations)
    results = run_benchmark(registry, iterations=args.iterations, seed=args.seed)
    print()
    print(format_results(results))
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Plain text run summaries for the CLI."""

from collector.models.copywriting import SourceResult
from collector.models.horoscope import HoroscopeOutput
from collector.models.places import BeefNoodleOutput


def format_horoscope_text(o: HoroscopeOutput) -> str:
    lines = [
        f"=== Horoscope ({o.update_time}) ===",
        f"Signs: {o.success_count}/{o.total_signs} succeeded, "
        f"{o.failure_count} failed",
        f"Traditional Chinese: {'yes' if o.converted_to_traditional else 'no'}",
        f"Duration: {o.processing_time_ms / 1000:.1f}s",
    ]
    for err in o.errors:
        lines.append(f"  ! {err}")
    return "\n".join(lines)


def format_copywriting_text(
    results: dict[str, SourceResult], target_count: int
) -> str:
    total = sum(r.count for r in results.values() if r.success)
    target = len(results) * target_count
    pct = total / target * 100 if target else 0.0
    lines = [f"=== Copywriting: {total}/{target} ({pct:.0f}%) ==="]
    for key, r in results.items():
        status = f"{r.count}/{target_count}" if r.success else "FAILED"
        lines.append(f"  {key}: {status}")
    return "\n".join(lines)


def format_beef_noodle_text(o: BeefNoodleOutput) -> str:
    lines = [
        f"=== Taipei beef noodles ({o.update_time}) ===",
        f"Shops: {len(o.shops)}",
        f"Duration: {o.processing_time_ms / 1000:.1f}s",
    ]
    for district, count in sorted(o.district_stats.items(), key=lambda kv: -kv[1]):
        lines.append(f"  {district}: {count}")
    if o.errors:
        lines.append(f"Errors: {len(o.errors)}")
    return "\n".join(lines)

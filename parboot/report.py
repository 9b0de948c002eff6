"""
Reporting for the workshop runner.

Results are kept as {"sequential": {lesson: ms}, "parallel": {lesson: ms}}.
"""

import ast
import re
from pathlib import Path

from .timing import speedup

TIME_PATTERN = re.compile(r'^\s*(Sequential|Parallel|Time):\s*([\d.]+)\s*ms', re.MULTILINE)

SEQ_COLOR = '#2196F3'
PAR_COLOR = '#4CAF50'


def parse_times(output):
    """Extract `Label: 12.34ms` lines from a lesson's output."""
    return {label: float(value) for label, value in TIME_PATTERN.findall(output)}


def lesson_names(results):
    names = list(results["sequential"].keys())
    for name in results["parallel"]:
        if name not in names:
            names.append(name)
    return names


def _ratio(seq_time, par_time):
    if seq_time and par_time:
        return speedup(seq_time, par_time)
    return None


def format_summary(results):
    """Summary table of sequential vs parallel timings."""
    lines = [
        "=" * 64,
        "                        SUMMARY TABLE",
        "=" * 64,
        f"{'Lesson':<20} {'Sequential (ms)':>16} {'Parallel (ms)':>14} {'Speedup':>10}",
        "-" * 64,
    ]

    for name in lesson_names(results):
        seq_time = results["sequential"].get(name)
        par_time = results["parallel"].get(name)
        ratio = _ratio(seq_time, par_time)

        seq_text = f"{seq_time:.2f}" if seq_time is not None else "-"
        par_text = f"{par_time:.2f}" if par_time is not None else "-"
        ratio_text = f"{ratio:.2f}x" if ratio is not None else "-"
        lines.append(f"{name:<20} {seq_text:>16} {par_text:>14} {ratio_text:>10}")

    lines.append("=" * 64)
    return "\n".join(lines)


def ascii_chart(results, bar_width=40):
    lines = ["=" * 64, "              LESSON TIMINGS (ASCII Chart)", "=" * 64, ""]

    names = lesson_names(results)
    if not names:
        lines.append("No results to display.")
        return "\n".join(lines)

    times = list(results["sequential"].values()) + list(results["parallel"].values())
    max_time = max(times) if times else 1

    for name in names:
        seq_time = results["sequential"].get(name, 0)
        par_time = results["parallel"].get(name, 0)

        seq_len = int((seq_time / max_time) * bar_width) if max_time > 0 else 0
        par_len = int((par_time / max_time) * bar_width) if max_time > 0 else 0

        lines.append(f"{name}:")
        lines.append(f"  Sequential |{'█' * seq_len}{' ' * (bar_width - seq_len)}| {seq_time:.2f}ms")
        lines.append(f"  Parallel   |{'▓' * par_len}{' ' * (bar_width - par_len)}| {par_time:.2f}ms")

        ratio = _ratio(seq_time, par_time)
        if ratio is not None:
            if ratio >= 1:
                lines.append(f"             → parallel {ratio:.2f}x faster")
            else:
                lines.append(f"             → sequential {1 / ratio:.2f}x faster")
        lines.append("")

    return "\n".join(lines)


def generate_graph_matplotlib(results, output_path):
    """Grouped bar chart of the timings using matplotlib."""
    # Figure without pyplot leaves the caller's backend alone
    from matplotlib.figure import Figure
    import numpy as np

    names = lesson_names(results)
    seq_times = [results["sequential"].get(n, 0) for n in names]
    par_times = [results["parallel"].get(n, 0) for n in names]

    x = np.arange(len(names))
    width = 0.35

    fig = Figure(figsize=(12, 6))
    ax = fig.subplots()

    bars1 = ax.bar(x - width/2, seq_times, width, label='Sequential', color=SEQ_COLOR)
    bars2 = ax.bar(x + width/2, par_times, width, label='Parallel', color=PAR_COLOR)

    ax.set_ylabel('Time (ms)', fontsize=12)
    ax.set_xlabel('Lesson', fontsize=12)
    ax.set_title('Sequential vs Parallel Bootstrap', fontsize=14, fontweight='bold')
    ax.set_xticks(x)
    ax.set_xticklabels(names, rotation=45, ha='right')
    ax.legend()

    for bars in (bars1, bars2):
        for bar in bars:
            height = bar.get_height()
            if height > 0:
                ax.annotate(f'{height:.1f}',
                    xy=(bar.get_x() + bar.get_width() / 2, height),
                    xytext=(0, 3),
                    textcoords="offset points",
                    ha='center', va='bottom', fontsize=8)

    fig.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    return True


def _centered_text(draw, x, y, text, fill, font):
    """Draw text horizontally centred on x with its top at y."""
    draw.text((x - draw.textlength(text, font=font) / 2, y), text, fill=fill, font=font)


def generate_graph_pillow(results, output_path):
    """Same chart drawn directly with Pillow."""
    from PIL import Image, ImageDraw, ImageFont

    width, height = 1200, 600
    img = Image.new('RGB', (width, height), 'white')
    draw = ImageDraw.Draw(img)

    font = ImageFont.load_default()

    _centered_text(draw, width//2, 20, "Sequential vs Parallel Bootstrap", 'black', font)

    names = lesson_names(results)
    if not names:
        _centered_text(draw, width//2, height//2, "No results", 'red', font)
        img.save(output_path)
        return True

    times = list(results["sequential"].values()) + list(results["parallel"].values())
    max_time = max(times) if times else 1

    margin_left = 100
    margin_right = 50
    margin_top = 60
    margin_bottom = 100

    chart_width = width - margin_left - margin_right
    chart_height = height - margin_top - margin_bottom
    bar_width = chart_width // len(names) // 3

    for i, name in enumerate(names):
        x_center = margin_left + (i + 0.5) * (chart_width // len(names))

        for offset, mode, color in ((-bar_width - 2, "sequential", SEQ_COLOR), (2, "parallel", PAR_COLOR)):
            value = results[mode].get(name, 0)
            bar_height = int((value / max_time) * chart_height) if max_time > 0 else 0
            bar_x = x_center + offset
            draw.rectangle(
                [bar_x, margin_top + chart_height - bar_height, bar_x + bar_width, margin_top + chart_height],
                fill=color
            )
            _centered_text(draw, bar_x + bar_width//2, margin_top + chart_height - bar_height - 15,
                           f"{value:.0f}", color, font)

        _centered_text(draw, x_center, height - margin_bottom + 10, name, 'black', font)

    draw.rectangle([width - 170, 50, width - 150, 70], fill=SEQ_COLOR)
    draw.text((width - 145, 54), "Sequential", fill='black', font=font)
    draw.rectangle([width - 170, 75, width - 150, 95], fill=PAR_COLOR)
    draw.text((width - 145, 79), "Parallel", fill='black', font=font)

    draw.text((10, height//2), "Time (ms)", fill='black', font=font)

    img.save(output_path)
    return True


RENDERERS = {
    "matplotlib": generate_graph_matplotlib,
    "pillow": generate_graph_pillow,
}


def generate_graph(results, output_path, renderer="matplotlib"):
    """Draw the chart, trying the other renderer and then ASCII on failure."""
    if renderer not in RENDERERS:
        raise ValueError(f"unknown renderer {renderer!r}, expected one of {', '.join(RENDERERS)}")

    order = [renderer] + [name for name in RENDERERS if name != renderer]
    for name in order:
        try:
            RENDERERS[name](results, output_path)
            print(f"\n✓ Graph saved to: {output_path}")
            return True
        except ImportError:
            print(f"\n⚠ {name} not found, trying next renderer...")
        except Exception as e:
            print(f"\n⚠ {name} error: {e}, trying next renderer...")

    print(ascii_chart(results))
    return False


def lesson_prose(path):
    """The narrative of a lesson: its module docstring."""
    source = Path(path).read_text(encoding="utf-8")
    return ast.get_docstring(ast.parse(source)) or ""


def lesson_title(path):
    stem = Path(path).stem
    number, _, rest = stem.partition("_")
    return f"Lesson {int(number)}: {rest.replace('_', ' ').capitalize()}"


def render_markdown(lessons):
    """Render lessons as a Markdown document.

    `lessons` is a list of dicts with keys `path`, `output` and `times`.
    """
    parts = ["# Parallel bootstrap workshop", ""]

    for lesson in lessons:
        parts.append(f"## {lesson_title(lesson['path'])}")
        parts.append("")
        prose = lesson_prose(lesson["path"])
        if prose:
            parts.append(prose)
            parts.append("")

        output = lesson.get("output")
        if output is None:
            parts.append("_This lesson failed to run._")
            parts.append("")
            continue

        parts.append("```")
        parts.append(output.rstrip())
        parts.append("```")
        parts.append("")

        times = lesson.get("times") or {}
        if "Sequential" in times and "Parallel" in times:
            ratio = _ratio(times["Sequential"], times["Parallel"])
            if ratio is not None:
                parts.append(f"Speedup: **{ratio:.2f}x**")
                parts.append("")

    return "\n".join(parts).rstrip() + "\n"

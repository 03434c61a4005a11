# Lower eighth blocks, index = eighths filled.
GLYPHS = " ▁▂▃▄▅▆▇█"


def _bucket_max(values, columns):
    n = len(values)
    return [
        max(values[col * n // columns:(col + 1) * n // columns])
        for col in range(columns)
    ]


def render_chart(samples, width, height, y_max=None):
    values = [float(e) for _, e in samples]
    if not values:
        return "(no data)"

    columns = min(max(width // 2, 1), len(values))
    rows = max(height // 4, 1)

    if y_max is None:
        y_max = max(values)
    if y_max <= 0:
        y_max = 1.0

    buckets = _bucket_max(values, columns)
    levels = [
        min(int(round(v / y_max * rows * 8)), rows * 8) if v > 0 else 0
        for v in buckets
    ]

    label_width = len(f"{y_max:.1f}")
    lines = []
    for row in range(rows, 0, -1):
        floor = (row - 1) * 8
        cells = []
        for level in levels:
            filled = min(max(level - floor, 0), 8)
            cells.append(GLYPHS[filled])
        label = f"{y_max:.1f}" if row == rows else ""
        lines.append(f"{label:>{label_width}} |{''.join(cells)}")

    lines.append(f"{'0.0':>{label_width}} +{'-' * columns}")
    x_max = str(len(values))
    padding = max(columns - len(x_max) - 1, 1)
    lines.append(f"{'':>{label_width}}  0{' ' * padding}{x_max}")
    return "\n".join(lines)


def format_edges(edges):
    if not edges:
        return "No edges detected."
    lines = []
    for edge in edges:
        bits = edge.normalized_entropy * 8
        lines.append(
            f"block {edge.block_index:>8}  {edge.edge_type.name:<7}  "
            f"{float(edge.normalized_entropy):.4f} ({float(bits):.2f} bits/byte)"
        )
    return "\n".join(lines)

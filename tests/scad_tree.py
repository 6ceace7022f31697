"""Inspection helpers for SolidPython trees: bounding boxes and transform chains."""
import math

def _param(node, *names):
    for name in names:
        value = node.params.get(name)
        if value is not None:
            return value
    return None

def _merge(boxes):
    boxes = [b for b in boxes if b is not None]
    if not boxes:
        return None
    lo = [min(b[0][i] for b in boxes) for i in range(3)]
    hi = [max(b[1][i] for b in boxes) for i in range(3)]
    return lo, hi

def _corners(box):
    lo, hi = box
    return [[x, y, z] for x in (lo[0], hi[0]) for y in (lo[1], hi[1]) for z in (lo[2], hi[2])]

def _from_points(points):
    return ([min(p[i] for p in points) for i in range(3)],
            [max(p[i] for p in points) for i in range(3)])

def rotate_point(point, degrees, axis):
    n = math.sqrt(sum(a * a for a in axis))
    kx, ky, kz = (a / n for a in axis)
    x, y, z = point
    c, s = math.cos(math.radians(degrees)), math.sin(math.radians(degrees))
    dot = kx * x + ky * y + kz * z
    cross = [ky * z - kz * y, kz * x - kx * z, kx * y - ky * x]
    return [p * c + cr * s + k * dot * (1 - c) for p, cr, k in zip(point, cross, (kx, ky, kz))]

def mirror_point(point, normal):
    nn = sum(n * n for n in normal)
    d = sum(p * n for p, n in zip(point, normal)) / nn
    return [p - 2 * d * n for p, n in zip(point, normal)]

def bounds(node):
    """Axis-aligned bounds of a node; rotated children are boxed by their rotated corners."""
    name = node.name
    if name == "cube":
        size = node.params["size"]
        if isinstance(size, (int, float)):
            size = [size] * 3
        if node.params.get("center"):
            return [-s / 2 for s in size], [s / 2 for s in size]
        return [0, 0, 0], list(size)
    if name == "cylinder":
        radii = [r for r in (_param(node, "r"), _param(node, "r1"), _param(node, "r2")) if r is not None]
        r = max(radii) if radii else _param(node, "d") / 2
        h = node.params["h"]
        z = (-h / 2, h / 2) if node.params.get("center") else (0, h)
        return [-r, -r, z[0]], [r, r, z[1]]
    if name in ("sphere", "circle"):
        r = _param(node, "r")
        rz = r if name == "sphere" else 0
        return [-r, -r, -rz], [r, r, rz]
    if name == "polygon":
        points = node.params["points"]
        return _from_points([[p[0], p[1], 0] for p in points])
    if name == "linear_extrude":
        lo, hi = _merge([bounds(c) for c in node.children])
        h = node.params["height"]
        z = (-h / 2, h / 2) if node.params.get("center") else (0, h)
        return [lo[0], lo[1], z[0]], [hi[0], hi[1], z[1]]
    if name == "difference":
        return bounds(node.children[0])
    inner = _merge([bounds(c) for c in node.children])
    if inner is None:
        return None
    if name == "translate":
        v = node.params["v"]
        return [a + b for a, b in zip(inner[0], v)], [a + b for a, b in zip(inner[1], v)]
    if name == "rotate":
        return _from_points([rotate_point(p, node.params["a"], node.params["v"]) for p in _corners(inner)])
    if name == "mirror":
        return _from_points([mirror_point(p, node.params["v"]) for p in _corners(inner)])
    return inner

def chain(node):
    """Nodes from ``node`` down through single-child translate/rotate wrappers."""
    res = []
    while node.name in ("translate", "rotate") and len(node.children) == 1:
        res.append(node)
        node = node.children[0]
    return res

def transform_point(node, point):
    """Where ``point`` of the innermost wrapped shape ends up."""
    for t in reversed(chain(node)):
        if t.name == "translate":
            point = [a + b for a, b in zip(point, t.params["v"])]
        else:
            point = rotate_point(point, t.params["a"], t.params["v"])
    return point

def find(node, name):
    res = [node] if node.name == name else []
    for child in node.children:
        res += find(child, name)
    return res

def segments(node):
    return _param(node, "segments", "$fn")

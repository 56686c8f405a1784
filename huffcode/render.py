# huffcode/render.py
# 将 Huffman 树画成 PNG：叶子横向依次排开，内部节点居中于左右子节点之上
from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from huffcode.errors import EmptyAlphabetError, HuffmanError
from huffcode.table import format_symbol
from huffcode.tree import Node, is_leaf, is_released

__all__ = ["layout_tree", "render_tree"]

def layout_tree(root: Optional[Node]) -> Dict[int, Tuple[float, int]]:
    """
    后序布局：返回 {id(node): (x, depth)}。
    - 叶子按从左到右的顺序取 x = 0, 1, 2, ...
    - 内部节点 x = 左右子节点 x 的平均值
    """
    positions: Dict[int, Tuple[float, int]] = {}
    if root is None:
        return positions

    leaf_x = 0
    # (node, depth, children_done)
    stack = [(root, 0, False)]
    while stack:
        node, depth, done = stack.pop()
        if is_leaf(node):
            positions[id(node)] = (float(leaf_x), depth)
            leaf_x += 1
            continue
        if not done:
            stack.append((node, depth, True))
            stack.append((node.right, depth + 1, False))
            stack.append((node.left, depth + 1, False))
            continue
        x = (positions[id(node.left)][0] + positions[id(node.right)][0]) / 2
        positions[id(node)] = (x, depth)
    return positions

def _label(node: Node) -> str:
    """节点标签；latin-1 以外的字符转成 \\uXXXX，默认字体不一定有对应字形。"""
    if is_leaf(node):
        label = f"{format_symbol(node.char)}:{node.freq}"
    else:
        label = str(node.freq)
    return label.encode("latin-1", "backslashreplace").decode("latin-1")

def render_tree(
    root: Optional[Node],
    out_path: Union[str, Path],
    node_radius: int = 18,
    x_gap: int = 56,
    y_gap: int = 72,
    margin: int = 32,
) -> Path:
    """
    绘制 Huffman 树并保存为图片。

    参数:
    - root: Huffman 树根节点
    - out_path: 输出图片路径（父目录不存在时自动创建）
    - node_radius / x_gap / y_gap / margin: 像素尺寸

    返回:
    - 实际保存的路径
    """
    if root is None:
        raise EmptyAlphabetError("空树无法绘制。")
    if is_released(root):
        raise HuffmanError("Huffman 树已释放，无法绘制。")

    positions = layout_tree(root)
    max_x = max(x for x, _ in positions.values())
    max_d = max(d for _, d in positions.values())
    W = int(2 * margin + max_x * x_gap + 2 * node_radius)
    H = int(2 * margin + max_d * y_gap + 2 * node_radius)

    def center(node: Node) -> Tuple[float, float]:
        x, d = positions[id(node)]
        return margin + node_radius + x * x_gap, margin + node_radius + d * y_gap

    img = Image.new("RGB", (W, H), "white")
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    # 先画边，再画节点，节点圆覆盖在边的端点上
    stack = [root]
    nodes = []
    while stack:
        node = stack.pop()
        nodes.append(node)
        if is_leaf(node):
            continue
        px, py = center(node)
        for child, bit in ((node.left, "0"), (node.right, "1")):
            cx, cy = center(child)
            draw.line([(px, py), (cx, cy)], fill="gray", width=2)
            draw.text(((px + cx) / 2 + 4, (py + cy) / 2 - 10), bit, fill="blue", font=font)
            stack.append(child)

    r = node_radius
    for node in nodes:
        cx, cy = center(node)
        fill = "#cfe8cf" if is_leaf(node) else "#e8e8e8"
        draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=fill, outline="black")
        label = _label(node)
        left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
        draw.text((cx - (right - left) / 2, cy - (bottom - top) / 2), label, fill="black", font=font)

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(out_path)
    print(f"[OK] Saved Huffman tree image to {out_path}")
    return out_path

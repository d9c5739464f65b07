"""
Graph utilities.
Print and analyse the structure of the computation graph below a root Node.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .engine import topological_order
from .node import Node


def get_graph_stats(root: Node) -> Dict:
    """
    Collect graph statistics (no printing).

    Returns:
        dict with nodes, edges, leaves, depth, fan-in/fan-out and an
        operation breakdown, over every Node reachable from `root`.
    """
    order = topological_order(root)
    index = {id(node): i for i, node in enumerate(order)}

    n_nodes = len(order)
    n_edges = sum(len(node.operands) for node in order)

    # fan-in is the operand count; fan-out counts consumers inside this graph
    fan_ins = [len(node.operands) for node in order]
    fan_outs = [0] * n_nodes
    for node in order:
        for operand in node.operands:
            fan_outs[index[id(operand)]] += 1

    # longest operand chain ending at each Node; operands are already filled in
    depths = [0] * n_nodes
    for i, node in enumerate(order):
        if node.operands:
            depths[i] = 1 + max(depths[index[id(p)]] for p in node.operands)

    op_counter = Counter(node.op.value for node in order)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for node in order if node.is_leaf),
        'depth': depths[-1],
        'max_fan_in': max(fan_ins),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter),
    }


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the computation graph.

    Args:
        root: output Node of the graph
        detailed: also print the node list (graphs up to 100 nodes)

    Returns:
        the statistics dictionary from get_graph_stats
    """
    stats = get_graph_stats(root)

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Depth:              {stats['depth']}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        print()
        print(format_graph(root, max_nodes=100))

    print("="*70 + "\n")

    return stats


def format_graph(root: Node, max_nodes: int = 20) -> str:
    """
    Render the graph one Node per line, in topological order.

    Operands are referenced by their index in that order, e.g.
        Node    2: mul          (  6.000000) grad=  0.000000 <- [Node0, Node1]
    """
    order = topological_order(root)
    index = {id(node): i for i, node in enumerate(order)}
    n_show = min(len(order), max_nodes)

    lines = []
    for i, node in enumerate(order[:n_show]):
        head = f"Node {i:4d}: {node.op.value:12s} ({float(node.value):10.6f}) grad={float(node.grad):10.6f}"
        if node.operands:
            parent_info = ", ".join(f"Node{index[id(p)]}" for p in node.operands)
            lines.append(f"{head} <- [{parent_info}]")
        else:
            label = f" {node.label}" if node.label else ""
            lines.append(f"{head} [leaf{label}]")

    if len(order) > max_nodes:
        lines.append(f"... ({len(order) - max_nodes} more nodes)")

    return "\n".join(lines)

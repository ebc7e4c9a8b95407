from __future__ import annotations
from typing import List
import networkx as nx
import numpy as np
from .datatypes import Document, Graph, Edge

def build_graph(doc: Document, simM: np.ndarray) -> Graph:
    nodes = doc.sentences
    edges: List[Edge] = []
    n = len(nodes)
    for i in range(n):
        for j in range(i+1, n):
            w = float(simM[i][j])
            if w > 0.0:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=nodes, edges=edges)

def isolated_nodes(graph: Graph) -> List[int]:
    connected = set()
    for e in graph.edges:
        connected.update((e.i, e.j))
    return [s.idx for s in graph.nodes if s.idx not in connected]

def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    for s in graph.nodes:
        G.add_node(s.idx, label=f"S{s.idx+1}", text=s.text)
    for e in graph.edges:
        G.add_edge(e.i, e.j, weight=e.weight)
    return G

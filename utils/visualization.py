import matplotlib.pyplot as plt
import networkx as nx

from graphs.graph_generation import to_networkx


def board_layout(graph, seed=None):
    """
    Fixed node positions for a board, so successive frames line up.

    Returns:
    - dict of Vertex -> (x, y).
    """
    return nx.spring_layout(to_networkx(graph), seed=seed)


def draw_game_state(graph, positions, ax=None, layout=None, title=None):
    """
    Draws the board with both players marked.

    :param graph: The WeightedGraph being played on.
    :param positions: A Positions snapshot (pursuer, evader) from the game.
    :param ax: Matplotlib axes to draw into (a new figure when None).
    :param layout: Vertex -> (x, y) mapping, e.g. from board_layout.
    :param title: Title for the plot.
    :return: The axes drawn on.
    """
    G = to_networkx(graph)
    if layout is None:
        layout = nx.spring_layout(G, seed=0)
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    ax.clear()

    pursuer, evader = positions
    colors = []
    for vertex in G.nodes:
        if vertex is pursuer and vertex is evader:
            colors.append("purple")
        elif vertex is pursuer:
            colors.append("red")
        elif vertex is evader:
            colors.append("green")
        else:
            colors.append("lightgray")

    labels = {v: v.label if v.label is not None else "" for v in G.nodes}
    nx.draw_networkx_edges(G, layout, ax=ax, alpha=0.5)
    nx.draw_networkx_nodes(G, layout, ax=ax, node_color=colors, edgecolors="black")
    nx.draw_networkx_labels(G, layout, labels=labels, ax=ax, font_size=8)

    # Add legend manually
    legend_labels = {"red": "Pursuer", "green": "Evader", "purple": "Capture"}
    handles = [plt.Line2D([0], [0], marker='o', color='w', markerfacecolor=color, markersize=10)
               for color in legend_labels.keys()]
    ax.legend(handles, legend_labels.values(), loc="upper right")

    if title:
        ax.set_title(title)
    ax.set_axis_off()
    return ax

import heapq
import logging
import random

from typedrill.config import N_WEAKEST, ZERO_SCORE_FLOOR
from typedrill.stats import head_tail

logger = logging.getLogger(__name__)


# weakest loop

def build_graph(trigrams):
    graph = {}
    for ts in trigrams:
        if ts.score > 0:
            head, tail = head_tail(ts.trigram)
            graph.setdefault(head, []).append((tail, 1.0 / ts.score))
            graph.setdefault(tail, [])
    return graph


def shortest_paths(graph, start):
    """Dijkstra over positive weights, returns predecessor of every reached vertex."""
    distance = {start: 0.0}
    predecessor = {}
    queue = [(0.0, start)]
    while queue:
        dist, vertex = heapq.heappop(queue)
        if dist > distance[vertex]:
            continue
        for nxt, weight in graph.get(vertex, ()):
            candidate = dist + weight
            if candidate < distance.get(nxt, float("inf")):
                distance[nxt] = candidate
                predecessor[nxt] = vertex
                heapq.heappush(queue, (candidate, nxt))
    return predecessor


def trace_path(predecessor, start, finish):
    path = [finish]
    step = finish
    while step != start:
        step = predecessor.get(step)
        if step is None:
            return None
        path.append(step)
    path.reverse()
    return path


def wrap(loop, length):
    return "".join(loop[i % len(loop)] for i in range(length))


def weakest_sequence(trigrams, length):
    # Repeating the weakest trigram abc as abcabc... would also drill bca and
    # cab, which may be trained well already. So each trigram abc is an edge
    # ab -> bc weighted 1 / score, and we look for the cheapest way from bc
    # back to ab, then repeat that loop.
    weakest = trigrams[0].trigram
    finish, start = head_tail(weakest)

    path = None
    if finish != start:
        predecessor = shortest_paths(build_graph(trigrams), start)
        path = trace_path(predecessor, start, finish)
    if path is None:
        # TODO: decide whether an unreachable loop should try the next weakest trigram
        logger.debug(f"No path from {start!r} back to {finish!r}, repeating {weakest!r}")
        loop = weakest
    else:
        loop = "".join(bigram[0] for bigram in path)
    return wrap(loop, length)


# markov chain

def build_chain(trigrams):
    chain = {}
    for ts in trigrams:
        bigram, nxt = ts.trigram[:2], ts.trigram[2]
        # keep every seen transition reachable
        score = ts.score if ts.score != 0 else ZERO_SCORE_FLOOR
        links = chain.setdefault(bigram, {})
        links[nxt] = links.get(nxt, 0.0) + score
    for links in chain.values():
        total = sum(links.values())
        for nxt in links:
            links[nxt] /= total
    return chain


def choose(links, choice):
    total = 0.0
    for nxt, weight in links.items():
        total += weight
        if choice <= total:
            return nxt
    # rounding can leave the cumulative sum just under 1
    return nxt


def markov_sequence(trigrams, length, rng = None):
    if rng is None:
        rng = random.Random()
    chain = build_chain(trigrams)
    seed = trigrams[rng.randrange(min(N_WEAKEST, len(trigrams)))].trigram
    text = list(seed)
    while len(text) < length:
        links = chain.get("".join(text[-2:]))
        if not links:
            text.append(text[len(text) % 3])
            continue
        text.append(choose(links, rng.random()))
    return "".join(text[:length])

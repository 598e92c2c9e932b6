from __future__ import annotations

"""
Fixed-content necklace enumeration (Sawada's CAT algorithm).

Every necklace with a given letter content is produced exactly once, as its
lexicographically least rotation. The search runs on an explicit stack of
frames so long scales do not hit the interpreter's recursion limit.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass
class _Frame:
    t: int
    p: int
    s: int
    # letter placed at position t by the child currently being explored
    j: Optional[int] = None


def _next_smaller(avail: List[int], j: int) -> Optional[int]:
    for letter in avail:
        if letter < j:
            return letter
    return None


def necklaces_fixed_content(content: Sequence[int]) -> List[Tuple[int, ...]]:
    """All necklaces with content[c] copies of class c, in ascending order."""
    classes = [c for c, count in enumerate(content) if count > 0]
    if not classes:
        return []
    rem = [content[c] for c in classes]
    last = len(rem) - 1
    n = sum(rem)

    rem[0] -= 1
    word = [0] + [last] * (n - 1)
    # letters still available, kept in descending order
    avail = [c for c in range(last, -1, -1) if c > 0 or rem[0] > 0]
    runs = [0] * n
    found: List[Tuple[int, ...]] = []

    stack = [_Frame(t=1, p=1, s=1)]
    while stack:
        frame = stack[-1]
        t, p = frame.t, frame.p
        if frame.j is None:
            if rem[last] == n - t:
                if (rem[last] == runs[t - p] and n % p == 0) or rem[last] > runs[t - p]:
                    found.append(tuple(word))
                stack.pop()
                continue
            if rem[0] == n - t:
                stack.pop()
                continue
            j = avail[0] if avail else None
        else:
            # returning from a child: put its letter back
            j = frame.j
            if rem[j] == 0:
                avail.append(j)
                avail.sort(reverse=True)
            rem[j] += 1
            j = _next_smaller(avail, j)

        if j is None or j < word[t - p]:
            word[t] = last
            stack.pop()
            continue

        runs[frame.s] = t - frame.s
        if rem[j] == 1:
            avail.remove(j)
        rem[j] -= 1
        word[t] = j
        frame.j = j
        stack.append(
            _Frame(
                t=t + 1,
                p=p if j == word[t - p] else t + 1,
                s=frame.s if j == last else t + 1,
            )
        )

    # letters were tried largest first, so results come out in descending order
    found.reverse()
    return [tuple(classes[x] for x in w) for w in found]

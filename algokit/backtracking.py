"""Backtracking searches: subsets, combinations, parentheses and word search."""

from __future__ import annotations

from typing import Sequence


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of nums; each element is excluded before it is included."""
    result: list[list[int]] = []

    def solve(index: int, chosen: list[int]) -> None:
        if index >= len(nums):
            result.append(list(chosen))
            return
        solve(index + 1, chosen)
        chosen.append(nums[index])
        solve(index + 1, chosen)
        chosen.pop()

    solve(0, [])
    return result


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct subset of nums, which may hold repeated values."""
    ordered = sorted(nums)
    result: list[list[int]] = []

    def pick(index: int, chosen: list[int]) -> None:
        result.append(list(chosen))
        for i in range(index, len(ordered)):
            if i > index and ordered[i] == ordered[i - 1]:
                continue
            chosen.append(ordered[i])
            pick(i + 1, chosen)
            chosen.pop()

    pick(0, [])
    return result


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct combination of candidates, each used once, summing to target."""
    ordered = sorted(candidates)
    result: list[list[int]] = []

    def pick(index: int, remaining: int, chosen: list[int]) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        for i in range(index, len(ordered)):
            if i > index and ordered[i] == ordered[i - 1]:
                continue
            if ordered[i] > remaining:
                break
            chosen.append(ordered[i])
            pick(i + 1, remaining - ordered[i], chosen)
            chosen.pop()

    pick(0, target, [])
    return result


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of n pairs of parentheses."""
    result: list[str] = []

    def generate(opened: int, closed: int, current: str) -> None:
        if len(current) == 2 * n:
            result.append(current)
            return
        if opened < n:
            generate(opened + 1, closed, current + "(")
        if closed < opened:
            generate(opened, closed + 1, current + ")")

    generate(0, 0, "")
    return result


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True if word can be traced through adjacent cells, each used at most once."""
    if not word:
        return True
    if not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def dfs(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        if (r, c) in visited or board[r][c] != word[index]:
            return False
        visited.add((r, c))
        found = any(
            dfs(r + dr, c + dc, index + 1)
            for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1))
        )
        visited.discard((r, c))
        return found

    return any(dfs(r, c, 0) for r in range(rows) for c in range(cols))
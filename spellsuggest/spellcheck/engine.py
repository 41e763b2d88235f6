VOWELS = frozenset("aeiouAEIOU")

GAP_COST = 2
SAME_CLASS_COST = 1
CROSS_CLASS_COST = 3


class DistanceEngine:
    """Weighted edit distance tuned for English-like typos.

    Insertions and deletions cost ``GAP_COST``. A substitution costs nothing
    for identical characters, ``SAME_CLASS_COST`` when both characters are
    vowels or both are not, and ``CROSS_CLASS_COST`` when a vowel is swapped
    for a non-vowel. Anything outside the vowel set counts as a consonant,
    digits and punctuation included.
    """

    gap_cost = GAP_COST

    def is_vowel(self, char: str) -> bool:
        return char in VOWELS

    def substitution_cost(self, a: str, b: str) -> int:
        if a == b:
            return 0
        if self.is_vowel(a) == self.is_vowel(b):
            return SAME_CLASS_COST
        return CROSS_CLASS_COST

    def distance(self, source: str, target: str) -> int:
        if source == target:
            return 0
        if not source or not target:
            return self.gap_cost * max(len(source), len(target))

        # The cost model is symmetric, so keep the shorter word on the row axis.
        if len(target) > len(source):
            source, target = target, source

        gap = self.gap_cost
        prev = [j * gap for j in range(len(target) + 1)]
        for i, a in enumerate(source, start=1):
            cur = [i * gap]
            for j, b in enumerate(target, start=1):
                cur.append(
                    min(
                        prev[j] + gap,
                        cur[j - 1] + gap,
                        prev[j - 1] + self.substitution_cost(a, b),
                    )
                )
            prev = cur
        return prev[-1]

    def distance_matrix(self, source: str, target: str) -> list[list[int]]:
        rows = len(source) + 1
        cols = len(target) + 1
        dp = [[0] * cols for _ in range(rows)]

        for i in range(rows):
            dp[i][0] = i * self.gap_cost
        for j in range(cols):
            dp[0][j] = j * self.gap_cost

        for i in range(1, rows):
            for j in range(1, cols):
                dp[i][j] = min(
                    dp[i - 1][j] + self.gap_cost,
                    dp[i][j - 1] + self.gap_cost,
                    dp[i - 1][j - 1] + self.substitution_cost(source[i - 1], target[j - 1]),
                )

        return dp


distance_engine = DistanceEngine()


def is_vowel(char: str) -> bool:
    return distance_engine.is_vowel(char)


def substitution_cost(a: str, b: str) -> int:
    return distance_engine.substitution_cost(a, b)


def distance(source: str, target: str) -> int:
    return distance_engine.distance(source, target)


def distance_matrix(source: str, target: str) -> list[list[int]]:
    return distance_engine.distance_matrix(source, target)

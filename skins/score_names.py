from typing import Optional

SCORE_NAMES = {
    -3: "albatross",
    -2: "eagle",
    -1: "birdie",
    0: "par",
    1: "bogey",
    2: "double bogey",
}


def score_type(strokes: int, par: Optional[int]) -> Optional[str]:
    """Name for a gross score on a hole (eagle, birdie, par, bogey, etc.)."""
    if par is None:
        return None
    relative = strokes - par
    if relative < -3:
        return "better than albatross"
    if relative > 2:
        return f"{relative} over par"
    return SCORE_NAMES[relative]

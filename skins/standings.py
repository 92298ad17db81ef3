from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from models import Game, HoleResult, PayoutEntry, PlayerStanding, SkinAward


def _standing_sort_key(row: PlayerStanding) -> Tuple[int, bool, float]:
    return (-row.amount, row.net_total is None, row.net_total or 0.0)


def player_standings(
    game: Game,
    hole_results: Dict[int, HoleResult],
    awards: Iterable[SkinAward],
    payouts: Iterable[PayoutEntry],
) -> List[PlayerStanding]:
    """
    One row per participant: totals, scoring against par, skins and winnings.

    Rows are ordered by winnings (descending), then net total (lowest first,
    players with no scores last), then roster order. Totals are None for a
    player with no recorded scores; ``to_par`` only counts holes whose par is
    known.
    """
    gross: Dict[str, List[int]] = {pid: [] for pid in game.player_ids}
    net: Dict[str, List[float]] = {pid: [] for pid in game.player_ids}
    relative: Dict[str, List[int]] = {pid: [] for pid in game.player_ids}
    for hole in sorted(hole_results):
        result = hole_results[hole]
        for entry in result.entries:
            gross[entry.player_id].append(entry.gross)
            net[entry.player_id].append(entry.net)
            if result.par is not None:
                relative[entry.player_id].append(entry.gross - result.par)

    awards = list(awards)
    skins_won = {pid: 0 for pid in game.player_ids}
    ctp_winners = set()
    for award in awards:
        if award.player_id in skins_won:
            skins_won[award.player_id] += 1
        if award.is_ctp:
            ctp_winners.add(award.player_id)

    amounts = {payout.player_id: payout.amount for payout in payouts}

    rows = []
    for participant in game.participants:
        pid = participant.player_id
        vs_par = relative[pid]
        rows.append(
            PlayerStanding(
                player_id=pid,
                name=participant.player.name,
                holes_played=len(gross[pid]),
                gross_total=sum(gross[pid]) if gross[pid] else None,
                net_total=sum(net[pid]) if net[pid] else None,
                to_par=sum(vs_par) if vs_par else None,
                birdies_or_better=sum(1 for diff in vs_par if diff < 0),
                eagles=sum(1 for diff in vs_par if diff <= -2),
                pars=sum(1 for diff in vs_par if diff == 0),
                skins=skins_won[pid],
                amount=amounts.get(pid, 0),
                is_ctp=pid in ctp_winners,
            )
        )
    # sorted() is stable, so remaining ties keep roster order
    return sorted(rows, key=_standing_sort_key)

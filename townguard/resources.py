"""The player's stock of gold and elixir."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Resources:
    """Gold and elixir held by the player."""

    gold: int = 400
    elixir: int = 400

    def spend_gold(self, amount: int) -> bool:
        """Take ``amount`` gold if there is enough; report whether it was taken."""
        if self.gold >= amount:
            self.gold -= amount
            return True
        return False

    def spend_elixir(self, amount: int) -> bool:
        """Take ``amount`` elixir if there is enough; report whether it was taken."""
        if self.elixir >= amount:
            self.elixir -= amount
            return True
        return False
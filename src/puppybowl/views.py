"""Pure renderers from player data to display elements, plus HTML output.

Renderers never touch the network or the display region; the controller
replaces the region with whatever they return. Triggers carry the command
they emit, and the HTML serializer binds each one to a POST form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Iterable, Sequence, Tuple, Union

from puppybowl.commands import Back, Command, Remove, ViewDetails
from puppybowl.config import Team, status_label, team_display_name
from puppybowl.models import Player


NO_PLAYERS_MESSAGE = "No players on the roster."
NO_TEAM_LABEL = "No team"
UNNAMED_PLAYER = "Unnamed player"
UNKNOWN_BREED = "Unknown"
CREATE_ACTION = "/ui/players"


@dataclass(frozen=True)
class Trigger:
    label: str
    command: Command


@dataclass(frozen=True)
class CardField:
    label: str
    value: str


@dataclass(frozen=True)
class Card:
    player_id: int
    title: str
    image_url: str
    image_alt: str
    fields: Tuple[CardField, ...] = ()
    triggers: Tuple[Trigger, ...] = ()
    detail: bool = False


@dataclass(frozen=True)
class Notice:
    message: str
    triggers: Tuple[Trigger, ...] = ()


Element = Union[Card, Notice]


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = "text"
    required: bool = False
    options: Tuple[Tuple[str, str], ...] = ()


@dataclass(frozen=True)
class PlayerForm:
    title: str
    fields: Tuple[FormField, ...] = field(default_factory=tuple)
    submit_label: str = "Add New Player"


def render_player_list(players: Sequence[Player] | None) -> list[Element]:
    if not players:
        return [Notice(message=NO_PLAYERS_MESSAGE)]
    return [
        Card(
            player_id=player.id,
            title=player.name or UNNAMED_PLAYER,
            image_url=player.image_url or "",
            image_alt=player.name or UNNAMED_PLAYER,
            fields=(CardField("Player ID", str(player.id)),),
            triggers=(
                Trigger("See details", ViewDetails(player.id)),
                Trigger("Remove from roster", Remove(player.id)),
            ),
        )
        for player in players
    ]


def render_player_detail(player: Player | None, player_id: int) -> list[Element]:
    back = Trigger("Back to all players", Back())
    if player is None:
        return [Notice(message=f"Player #{player_id} could not be loaded.", triggers=(back,))]
    return [
        Card(
            player_id=player.id,
            title=player.name or UNNAMED_PLAYER,
            image_url=player.image_url or "",
            image_alt=player.name or UNNAMED_PLAYER,
            fields=(
                CardField("Player ID", str(player.id)),
                CardField("Breed", player.breed or UNKNOWN_BREED),
                CardField("Team", team_display_name(player.team_id)),
                CardField("Status", status_label(player.status)),
            ),
            triggers=(back,),
            detail=True,
        )
    ]


def render_new_player_form(
    title: str,
    teams: Iterable[Team],
    statuses: Iterable[Tuple[str, str]],
) -> PlayerForm:
    team_options = tuple((str(team.team_id), team.name) for team in teams) + (("", NO_TEAM_LABEL),)
    return PlayerForm(
        title=title,
        fields=(
            FormField("name", "Player Name", required=True),
            FormField("breed", "Player Breed", required=True),
            FormField("imageUrl", "Player Image", kind="url"),
            FormField("status", "Status", kind="select", options=tuple(statuses)),
            FormField("team", "Team", kind="select", options=team_options),
        ),
    )


def command_action(command: Command) -> str:
    if isinstance(command, ViewDetails):
        return f"/ui/players/{command.player_id}/details"
    if isinstance(command, Remove):
        return f"/ui/players/{command.player_id}/remove"
    if isinstance(command, Back):
        return "/ui/back"
    raise TypeError(f"Unsupported command: {command!r}")


def _trigger_html(trigger: Trigger) -> str:
    css = "secondary" if isinstance(trigger.command, Remove) else ""
    return (
        f"<form method=\"post\" action=\"{escape(command_action(trigger.command))}\" class=\"trigger\">"
        f"<button type=\"submit\" class=\"{css}\">{escape(trigger.label)}</button></form>"
    )


def _card_html(card: Card) -> str:
    heading = "h1" if card.detail else "h2"
    title = f"Name: {card.title}" if card.detail else card.title
    rows = "".join(f"<p>{escape(item.label)}: {escape(item.value)}</p>" for item in card.fields)
    triggers = "".join(_trigger_html(trigger) for trigger in card.triggers)
    css = "card single" if card.detail else "card"
    return (
        f"<div class=\"{css}\" data-player-id=\"{card.player_id}\">"
        f"<{heading}>{escape(title)}</{heading}>"
        f"{rows}"
        f"<img src=\"{escape(card.image_url)}\" alt=\"{escape(card.image_alt)}\">"
        f"{triggers}</div>"
    )


def element_to_html(element: Element) -> str:
    if isinstance(element, Card):
        return _card_html(element)
    triggers = "".join(_trigger_html(trigger) for trigger in element.triggers)
    return f"<p class=\"notice\">{escape(element.message)}</p>{triggers}"


def region_to_html(elements: Sequence[Element]) -> str:
    return "".join(element_to_html(element) for element in elements)


def _field_html(form_field: FormField) -> str:
    name = escape(form_field.name)
    if form_field.kind == "select":
        options = "".join(
            f"<option value=\"{escape(value)}\">{escape(label)}</option>" for value, label in form_field.options
        )
        return f"<label for=\"{name}\">{escape(form_field.label)}</label><select name=\"{name}\" id=\"{name}\">{options}</select>"
    required = " required" if form_field.required else ""
    return (
        f"<input id=\"{name}\" name=\"{name}\" type=\"{escape(form_field.kind)}\" "
        f"placeholder=\"{escape(form_field.label)}\"{required}/>"
    )


def form_to_html(form: PlayerForm | None) -> str:
    if form is None:
        return ""
    fields = "".join(_field_html(item) for item in form.fields)
    return (
        f"<form id=\"new-player-form\" method=\"post\" action=\"{CREATE_ACTION}\">"
        f"<h1 id=\"title\">{escape(form.title)}</h1>"
        "<p>Add a new player to the roster:</p>"
        f"{fields}<button type=\"submit\">{escape(form.submit_label)}</button></form>"
    )


def render_page(form_html: str, region_html: str) -> str:
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>Puppy Bowl Roster</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 2rem; background: #f5f7fa; }}
        main {{ display: flex; flex-wrap: wrap; gap: 1rem; }}
        form#new-player-form {{ display: grid; gap: 0.75rem; margin-bottom: 2rem; max-width: 420px; }}
        input, select {{ padding: 0.5rem; border-radius: 6px; border: 1px solid #cbd5e1; }}
        button {{ padding: 0.6rem 1.2rem; border-radius: 6px; border: none; background: #2563eb; color: #fff; cursor: pointer; }}
        button.secondary {{ background: #475569; }}
        .card {{ background: #fff; padding: 1rem; border-radius: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.08); width: 220px; }}
        .card.single {{ width: 360px; }}
        .card img {{ max-width: 100%; border-radius: 8px; }}
        .card form.trigger {{ margin-top: 0.5rem; }}
        .notice {{ padding: 0.75rem 1rem; border-radius: 6px; background: #f8fafc; border: 1px solid #e2e8f0; }}
    </style>
</head>
<body>
    {form_html}
    <main>{region_html}</main>
</body>
</html>"""

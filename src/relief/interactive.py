"""Prompt-driven entry of beneficiaries and the road network.

Every prompt loops until the answer validates, so the caller always receives a
well-formed :class:`ReliefRequest`.
"""

from __future__ import annotations

from typing import Callable

from pydantic import ValidationError

from .schemas.relief import BeneficiaryInput, NetworkInput, ReliefRequest, RoadInput
from .models.domain import Gender

Ask = Callable[[str], str]
Say = Callable[[str], None]


def _ask_non_negative_int(ask: Ask, prompt: str, retry: str) -> int:
    answer = ask(prompt)
    while True:
        try:
            value = int(answer.strip())
        except ValueError:
            value = -1
        if value >= 0:
            return value
        answer = ask(retry)


def _ask_non_empty(ask: Ask, say: Say, prompt: str) -> str:
    answer = ask(prompt).strip()
    while not answer:
        say("Value cannot be empty.")
        answer = ask(prompt).strip()
    return answer


def _ask_gender(ask: Ask) -> Gender:
    answer = ask("Gender (M/F): ")
    while True:
        if answer.strip().upper() in {"M", "F"}:
            return Gender.parse(answer)
        answer = ask("Invalid input. Please enter M or F: ")


def prompt_beneficiaries(ask: Ask = input, say: Say = print) -> list[BeneficiaryInput]:
    count = _ask_non_negative_int(
        ask,
        "Enter number of flood-affected people to register: ",
        "Invalid input. Please enter a valid non-negative number: ",
    )
    beneficiaries: list[BeneficiaryInput] = []
    for number in range(1, count + 1):
        say(f"\n--- Person {number} ---")
        name = _ask_non_empty(ask, say, "Name: ")
        age = _ask_non_negative_int(ask, "Age: ", "Invalid input. Please enter a valid non-negative age: ")
        gender = _ask_gender(ask)
        city = _ask_non_empty(ask, say, "Living place (city): ")
        beneficiaries.append(BeneficiaryInput(name=name, age=age, gender=gender, city=city))
    return beneficiaries


def prompt_network(ask: Ask = input, say: Say = print) -> NetworkInput:
    say("--- City and Road Network Setup ---")
    city_count = _ask_non_negative_int(
        ask, "Enter the number of cities: ", "Invalid input. Please enter a valid non-negative number: "
    )
    say(f"Enter the name of the {city_count} cities (one per line):")
    cities: list[str] = []
    while len(cities) < city_count:
        name = _ask_non_empty(ask, say, "")
        if len(name.split()) != 1:
            say("City names must be a single word. Please try again.")
            continue
        if name in cities:
            say(f"City '{name}' was already entered. Please enter a different city.")
            continue
        cities.append(name)

    road_count = _ask_non_negative_int(
        ask, "Enter the number of roads: ", "Invalid input. Please enter a valid non-negative number: "
    )
    say("Enter the connections (format: city1 city2 distance) on each line:")
    known = set(cities)
    roads: list[RoadInput] = []
    while len(roads) < road_count:
        parts = ask("").split()
        if len(parts) != 3:
            say("Invalid format. Please enter: city1 city2 distance.")
            continue
        from_city, to_city, raw_distance = parts
        try:
            distance = int(raw_distance)
        except ValueError:
            say("Distance must be a whole number. Please try again.")
            continue
        if distance < 0:
            say("Negative distance is not allowed. Please try again.")
            continue
        if from_city not in known or to_city not in known:
            say("Unknown city name. Please enter valid cities.")
            continue
        roads.append(RoadInput(from_city=from_city, to_city=to_city, distance=distance))
    return NetworkInput(cities=cities, roads=roads)


def _ask_city(ask: Ask, say: Say, prompt: str, known: set[str]) -> str:
    answer = ask(prompt).strip()
    while answer not in known:
        say(f"City '{answer}' not found in the graph.")
        answer = ask(prompt).strip()
    return answer


def prompt_request(ask: Ask = input, say: Say = print) -> ReliefRequest:
    """Collect a full scenario: people, cities, roads, then the source/destination pair."""
    beneficiaries = prompt_beneficiaries(ask, say)
    network = prompt_network(ask, say)
    known = set(network.cities)
    if not known:
        raise ValueError("At least one city is required to plan routes.")
    source = _ask_city(ask, say, "\nEnter a source city for pathfinding: ", known)
    destination = _ask_city(ask, say, "Enter a destination city for pathfinding: ", known)
    try:
        return ReliefRequest(
            beneficiaries=beneficiaries,
            network=network,
            source=source,
            destination=destination,
        )
    except ValidationError as exc:
        raise ValueError(f"Entered scenario is invalid: {exc}") from exc

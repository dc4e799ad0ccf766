# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tourneycal import configuration, time
from tourneycal.errors import TournamentNotFoundError
from tourneycal.model.entity_id import EntityId, generate_entity_id
from tourneycal.model.tournament import Tournament
from tourneycal.slug import slugify

logger = logging.getLogger(__name__)


class TournamentRepository:
    def __init__(self) -> None:
        self._tournaments: Optional[list[Tournament]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def tournaments(self) -> list[Tournament]:
        if self._tournaments is None:
            self.__load_data()
        if self._tournaments is None:
            raise ValueError("tournaments could not be loaded")
        return self._tournaments

    def __load_data(self) -> None:
        self._tournaments = []
        if not configuration.DATA_TOURNAMENTS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_TOURNAMENTS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_tournament = load(file_path.read_text(), Loader=Loader)
            if raw_tournament is not None:
                self._tournaments.append(
                    self.__convert_tournament_for_deserialization(raw_tournament)
                )
        logger.debug(
            "loaded %d tournaments from %s",
            len(self._tournaments),
            configuration.DATA_TOURNAMENTS_DIR,
        )

    def __save_data(self) -> None:
        configuration.DATA_TOURNAMENTS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for tournament in self.tournaments:
            if tournament["id"] in self._dirty_ids:
                serializable_tournament = self.__convert_tournament_for_serialization(
                    deepcopy(tournament)
                )
                file_path = configuration.DATA_TOURNAMENTS_DIR / f"{tournament['id']}.yaml"
                file_path.write_text(dump(serializable_tournament, Dumper=Dumper))

        # Remove deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_TOURNAMENTS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        logger.debug(
            "flushed %d changed and %d deleted tournaments",
            len(self._dirty_ids),
            len(self._deleted_ids),
        )

        # Clear tracking sets
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._tournaments is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_tournament_for_serialization(
        self, tournament: Tournament
    ) -> dict[str, Any]:
        serializable_tournament = cast(dict[str, Any], tournament)
        serializable_tournament["date_start"] = time.date_to_iso_str(
            serializable_tournament["date_start"]
        )
        serializable_tournament["date_end"] = time.date_to_iso_str_optional(
            serializable_tournament["date_end"]
        )
        serializable_tournament["created"] = time.datetime_to_iso_str(
            serializable_tournament["created"]
        )
        serializable_tournament["updated"] = time.datetime_to_iso_str(
            serializable_tournament["updated"]
        )
        return serializable_tournament

    def __convert_tournament_for_deserialization(
        self, tournament: dict[str, Any]
    ) -> Tournament:
        deserializable_tournament = tournament
        deserializable_tournament["date_start"] = time.date_from_value(
            deserializable_tournament["date_start"]
        )
        deserializable_tournament["date_end"] = time.date_from_value_optional(
            deserializable_tournament.get("date_end")
        )
        deserializable_tournament["created"] = time.datetime_from_str(
            str(deserializable_tournament["created"])
        )
        deserializable_tournament["updated"] = time.datetime_from_str(
            str(deserializable_tournament["updated"])
        )
        deserializable_tournament.setdefault("featured", False)
        deserializable_tournament.setdefault("categories", None)
        return cast(Tournament, deserializable_tournament)

    def __find(self, slug: str) -> Tournament:
        matching_tournaments = [
            tournament for tournament in self.tournaments if tournament["slug"] == slug
        ]
        if len(matching_tournaments) == 0:
            raise TournamentNotFoundError(f"no tournament with slug '{slug}'")
        return matching_tournaments[0]

    def __unique_slug(self, name: str) -> str:
        base_slug = slugify(name) or "tournament"
        existing_slugs = {tournament["slug"] for tournament in self.tournaments}
        slug = base_slug
        suffix = 2
        while slug in existing_slugs:
            slug = f"{base_slug}-{suffix}"
            suffix += 1
        return slug

    def save_new_tournament(self, tournament: Tournament) -> EntityId:
        self.is_dirty = True

        tournament["id"] = generate_entity_id()
        tournament["slug"] = self.__unique_slug(tournament["name"])

        # Deduplicate categories
        if tournament["categories"] is not None:
            tournament["categories"] = list(dict.fromkeys(tournament["categories"]))

        self.tournaments.append(tournament)
        self._dirty_ids.add(tournament["id"])

        return tournament["id"]

    def modify_tournament(
        self,
        slug: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        date_start: Optional[pendulum.Date] = None,
        date_end: Optional[pendulum.Date] = None,
        city: Optional[str] = None,
        region: Optional[str] = None,
        level: Optional[str] = None,
        categories: Optional[list[str]] = None,
        featured: Optional[bool] = None,
        entry_fee_min: Optional[int] = None,
        registration_url: Optional[str] = None,
        status: Optional[str] = None,
        remove_date_end: bool = False,
        remove_description: bool = False,
        remove_registration_url: bool = False,
    ) -> None:
        tournament = self.__find(slug)

        self.is_dirty = True
        self._dirty_ids.add(cast(str, tournament["id"]))

        # Set updated timestamp to current moment
        tournament["updated"] = time.now_utc()
        if name is not None:
            tournament["name"] = name
        if description is not None:
            tournament["description"] = description
        if date_start is not None:
            tournament["date_start"] = date_start
        if date_end is not None:
            tournament["date_end"] = date_end
        if city is not None:
            tournament["city"] = city
        if region is not None:
            tournament["region"] = region
        if level is not None:
            tournament["level"] = level
        if categories is not None:
            tournament["categories"] = list(dict.fromkeys(categories))
        if featured is not None:
            tournament["featured"] = featured
        if entry_fee_min is not None:
            tournament["entry_fee_min"] = entry_fee_min
        if registration_url is not None:
            tournament["registration_url"] = registration_url
        if status is not None:
            tournament["status"] = status

        if remove_date_end:
            tournament["date_end"] = None
        if remove_description:
            tournament["description"] = None
        if remove_registration_url:
            tournament["registration_url"] = None

    def set_status(self, slug: str, status: str) -> None:
        self.modify_tournament(slug, status=status)

    def delete_tournament(self, slug: str) -> None:
        tournament = self.__find(slug)

        self.is_dirty = True
        tournament_id = cast(str, tournament["id"])
        self._deleted_ids.add(tournament_id)
        self._dirty_ids.discard(tournament_id)
        self._tournaments = [
            existing for existing in self.tournaments if existing["id"] != tournament_id
        ]

    def get_all_tournaments(self) -> list[Tournament]:
        return deepcopy(self.tournaments)

    def get_tournament_by_slug(self, slug: str) -> Tournament:
        return deepcopy(self.__find(slug))


TOURNAMENT_REPO = TournamentRepository()

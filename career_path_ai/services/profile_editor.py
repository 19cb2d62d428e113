"""
Refine step edits. Every operation returns a new UserProfile; the input profile
and its lists are never modified or shared.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel

from career_path_ai.config import DEFAULT_PROFICIENCY
from career_path_ai.schemas.profile import (
    Education,
    Language,
    Project,
    UserLinks,
    UserProfile,
    WorkExperience,
)

SCALAR_FIELDS = ("full_name", "email", "phone", "summary")

# list field -> item type (str for plain string lists)
LIST_FIELDS: dict = {
    "skills": str,
    "experience": WorkExperience,
    "education": Education,
    "certifications": str,
    "languages": Language,
    "projects": Project,
}

LINK_FIELDS = tuple(UserLinks.model_fields)

# Wire names accepted as well (fullName -> full_name)
_ALIASES = {
    info.alias: name for name, info in UserProfile.model_fields.items() if info.alias
}


def _field_name(field: str) -> str:
    return _ALIASES.get(field, field)


def _blank_item(list_name: str) -> Union[str, BaseModel]:
    item_type = LIST_FIELDS[list_name]
    if item_type is str:
        return ""
    if item_type is Language:
        return Language(proficiency=DEFAULT_PROFICIENCY)
    return item_type()


def _coerce_item(list_name: str, value: Any) -> Union[str, BaseModel]:
    item_type = LIST_FIELDS[list_name]
    if item_type is str:
        if not isinstance(value, str):
            raise TypeError(f"{list_name} items must be strings")
        return value
    if isinstance(value, item_type):
        return value.model_copy(deep=True)
    return item_type.model_validate(value)


def _copy_items(profile: UserProfile, list_name: str) -> list:
    return [i.model_copy(deep=True) if isinstance(i, BaseModel) else i for i in getattr(profile, list_name)]


def _check_index(profile: UserProfile, list_name: str, index: int) -> list:
    items = _copy_items(profile, list_name)
    if not 0 <= index < len(items):
        raise IndexError(f"{list_name} index {index} out of range (size {len(items)})")
    return items


def _with(profile: UserProfile, **changes: Any) -> UserProfile:
    updated = profile.model_copy(deep=True)
    for name, value in changes.items():
        setattr(updated, name, value)
    return updated


def _list_name(list_name: str) -> str:
    name = _field_name(list_name)
    if name not in LIST_FIELDS:
        raise KeyError(f"not a list field: {list_name}")
    return name


def update_field(profile: UserProfile, field: str, value: Any) -> UserProfile:
    """Replace one top-level field (scalar, whole list, or links record)."""
    name = _field_name(field)
    if name in SCALAR_FIELDS:
        return _with(profile, **{name: "" if value is None else str(value)})
    if name in LIST_FIELDS:
        return _with(profile, **{name: [_coerce_item(name, v) for v in (value or [])]})
    if name == "links":
        links = value.model_copy() if isinstance(value, UserLinks) else UserLinks.model_validate(value or {})
        return _with(profile, links=links)
    raise KeyError(f"unknown profile field: {field}")


def update_link(profile: UserProfile, link_name: str, value: Optional[str]) -> UserProfile:
    if link_name not in LINK_FIELDS:
        raise KeyError(f"unknown link: {link_name}")
    links = profile.links.model_copy(update={link_name: value or ""})
    return _with(profile, links=links)


def update_item(profile: UserProfile, list_name: str, index: int, value: Any) -> UserProfile:
    """
    Replace the item at index. For object lists value may be a full item or a
    dict of field changes merged into the existing item.
    """
    name = _list_name(list_name)
    items = _check_index(profile, name, index)
    if LIST_FIELDS[name] is not str and isinstance(value, dict):
        merged = {**items[index].model_dump(), **value}
        items[index] = _coerce_item(name, merged)
    else:
        items[index] = _coerce_item(name, value)
    return _with(profile, **{name: items})


def append_item(profile: UserProfile, list_name: str, item: Any = None) -> UserProfile:
    """Append item (or a blank entry for the list) at the end."""
    name = _list_name(list_name)
    new_item = _blank_item(name) if item is None else _coerce_item(name, item)
    return _with(profile, **{name: _copy_items(profile, name) + [new_item]})


def remove_item(profile: UserProfile, list_name: str, index: int) -> UserProfile:
    name = _list_name(list_name)
    items = _check_index(profile, name, index)
    del items[index]
    return _with(profile, **{name: items})

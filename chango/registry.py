"""Image registry kept up to date through observers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional


@dataclass
class Image:
    name: str
    tag: str
    sha: str
    updated: Optional[datetime] = None

    def __str__(self) -> str:
        return f"{{{self.name} {self.tag} {self.sha} {self.updated}}}"


@dataclass
class Subject:
    """Notifies registered observers of image updates."""

    observers: List[Any] = field(default_factory=list)

    def register(self, observer: Any) -> None:
        self.observers.append(observer)

    def update(self, name: str, tag: str, sha: str) -> None:
        for observer in self.observers:
            observer.update_sha_or_add_image(name, tag, sha)


@dataclass
class Registry:
    images: List[Image] = field(default_factory=list)

    def update_sha_or_add_image(self, name: str, tag: str, sha: str) -> bool:
        """Set the sha of every image matching name and tag; return whether any matched."""
        matches = [i for i in self.images if i.name == name and i.tag == tag]
        for image in matches:
            image.sha = sha
            image.updated = datetime.now(timezone.utc)
        if not matches:
            print("Image was not found in registry")
        return bool(matches)


def default_registry() -> Registry:
    """Return the registry with its three preset images."""
    utc = timezone.utc
    return Registry([
        Image("etzba/etz", "development",
              "sha256:f42d7f87fb6388933ba346f14f800bc7550fa5e1df336f609e18a9415d592f3d",
              datetime(2011, 10, 10, 12, 23, 13, 233241, tzinfo=utc)),
        Image("etzba/gopu", "latest",
              "sha256:8f4b2676dad4e9be0fe9a2fc2ad611b0d9fc81cf426d3e5593f7b2f11834a6b1",
              datetime(2003, 10, 12, 9, 54, 44, 987876, tzinfo=utc)),
        Image("etzba/pggo", "latest",
              "sha256:d135a04a2ac74466c7c01747daee7d4efae7d09e457b0e8d54bc510f2be1408a",
              datetime(1999, 10, 21, 1, 32, 33, 654, tzinfo=utc)),
    ])


def update_image_in_registry(image_name: str, image_tag: str, image_sha: str) -> Registry:
    """Notify the default registry of an update and print its images."""
    subject = Subject()
    registry = default_registry()
    subject.register(registry)
    subject.update(image_name, image_tag, image_sha)
    print("Images in registry\n##################")
    for index, image in enumerate(registry.images, start=1):
        print(index, ".", image)
    return registry
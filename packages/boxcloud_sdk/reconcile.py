"""Converge a box/version/provider triple on the registry.

``ensure_provider_present`` reads the current box, then issues the create,
update and delete calls needed for the box to hold a released version
containing the wanted provider. Calls run strictly one after another. Any
failure aborts the run and propagates unchanged; steps that already
completed are not rolled back.

There is no compare-and-swap: two runs against the same box race, and the
registry keeps whichever write lands last.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from packages.boxcloud_sdk.equivalence import box_mismatches, provider_matches
from packages.boxcloud_sdk.errors import ApiCallError
from packages.boxcloud_sdk.lookup import find_provider, find_version
from packages.boxcloud_sdk.models import (
    BoxSpec,
    ProviderSpec,
    RemoteBox,
    RemoteVersion,
    VersionSpec,
)
from packages.boxcloud_shared.logging import fields, log_context

if TYPE_CHECKING:
    from packages.boxcloud_sdk.client import VagrantCloudClient

logger = logging.getLogger(__name__)


def ensure_provider_present(
    client: VagrantCloudClient,
    box: BoxSpec,
    version: VersionSpec,
    provider: ProviderSpec,
    *,
    prune_others: bool = False,
) -> RemoteBox:
    """Make ``provider`` available in the released ``version`` of ``box``.

    Missing resources are created and out-of-date ones updated. With
    ``prune_others`` every other version loses its provider named like
    ``provider``, and a version left without providers is deleted. The
    target version is never pruned.

    Returns the box as re-read after all changes.
    """
    context = {
        fields.BOX_OWNER: box.owner,
        fields.BOX_NAME: box.name,
        fields.BOX_VERSION: version.version,
        fields.PROVIDER: provider.name,
        fields.PRUNE_OTHERS: prune_others,
    }
    with log_context(context):
        box_state = _resolve_box(client, box)

        mismatches = box_mismatches(box, box_state)
        if mismatches:
            logger.info("Updating box, differing fields: %s", ", ".join(mismatches))
            box_state = client.update_box(box)

        if prune_others:
            _prune_other_versions(client, box, box_state.versions, version, provider)

        target_index = find_version(box_state.versions, version.version)
        if target_index is None:
            logger.info("Creating version %s", version.version)
            target = client.create_version(box, version)
        else:
            target = box_state.versions[target_index]

        _ensure_provider(client, box, version, provider, target)

        logger.info("Releasing version %s", version.version)
        client.release_version(box, version)
        return client.read_box(box)


def _resolve_box(client: VagrantCloudClient, box: BoxSpec) -> RemoteBox:
    """Read the box, creating it when the registry reports it missing."""
    try:
        return client.read_box(box)
    except ApiCallError as exc:
        if not exc.is_not_found:
            raise
    logger.info("Box %s/%s not found, creating it", box.owner, box.name)
    return client.create_box(box)


def _prune_other_versions(
    client: VagrantCloudClient,
    box: BoxSpec,
    versions: Sequence[RemoteVersion],
    target: VersionSpec,
    provider: ProviderSpec,
) -> None:
    """Delete same-named providers outside ``target`` and drop emptied versions."""
    for existing in versions:
        if existing.version == target.version:
            continue
        if find_provider(existing.providers, provider.name) is None:
            continue

        description = existing.description_markdown
        doomed = VersionSpec(
            version=existing.version,
            description=description if description is not None else target.description,
        )
        logger.info(
            "Pruning provider %s from version %s", provider.name, existing.version
        )
        client.delete_provider(box, doomed, provider)
        if len(existing.providers) == 1:
            logger.info("Deleting emptied version %s", existing.version)
            client.delete_version(box, doomed)


def _ensure_provider(
    client: VagrantCloudClient,
    box: BoxSpec,
    version: VersionSpec,
    provider: ProviderSpec,
    target: RemoteVersion,
) -> None:
    """Create the provider in ``target`` or update it when it differs."""
    index = find_provider(target.providers, provider.name)
    if index is None:
        logger.info("Creating provider %s", provider.name)
        client.create_provider(box, version, provider)
        return
    if not provider_matches(provider, target.providers[index]):
        logger.info("Updating provider %s", provider.name)
        client.update_provider(box, version, provider)

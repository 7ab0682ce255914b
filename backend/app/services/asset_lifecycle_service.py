"""Asset lifecycle service - single authority for asset state transitions.

State machine for Asset.assignment_status:

    create -> AVAILABLE --assign--> ASSIGNED --recover--> RECOVERED
                                       ^                      |
                                       +-------assign---------+

- assign is allowed from AVAILABLE and RECOVERED
- recover is allowed only from ASSIGNED
- delete is refused while ASSIGNED

Every operation returns a ServiceResult. Lookups and validation all run
before the first attribute write, so a failed call leaves nothing pending
in the session.
"""

import logging

from app.constants import AssignmentStatus, ErrorKind
from app.models import Asset
from app.schemas.asset import AssetDraft
from app.services.repositories import (
    AssetRepository,
    CategoryRepository,
    EmployeeRepository,
    NotFoundError,
)
from app.services.result import ServiceResult

logger = logging.getLogger(__name__)

CATEGORY_REQUIRED_MESSAGE = "Category is required with a valid ID"


class AssetLifecycleService:
    """Creates, updates, assigns, recovers and deletes assets.

    Store handles are passed in explicitly so the same service can run
    against any session the caller controls.
    """

    def __init__(
        self,
        assets: AssetRepository,
        categories: CategoryRepository,
        employees: EmployeeRepository,
    ) -> None:
        self._assets = assets
        self._categories = categories
        self._employees = employees

    def create(self, draft: AssetDraft) -> ServiceResult[Asset]:
        """Create an asset in AVAILABLE state.

        Any status or employee on the draft is ignored.

        Returns:
            INVALID_INPUT if the draft carries no category id,
            NOT_FOUND if the category does not exist.
        """
        category_id = draft.category.id if draft.category is not None else None
        if category_id is None:
            return ServiceResult.fail(ErrorKind.INVALID_INPUT, CATEGORY_REQUIRED_MESSAGE)

        try:
            category = self._categories.get_by_id(category_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        asset = Asset(
            name=draft.name,
            purchase_date=draft.purchase_date,
            condition_notes=draft.condition_notes,
            category=category,
            assignment_status=AssignmentStatus.AVAILABLE,
            assigned_to=None,
        )
        asset = self._assets.save(asset)
        logger.info(f"Created asset {asset.id} '{asset.name}' in category {category.id}")
        return ServiceResult.ok(asset)

    def list_all(self) -> ServiceResult[list[Asset]]:
        """Return every asset in id order."""
        return ServiceResult.ok(list(self._assets.find_all()))

    def search(self, name_fragment: str) -> ServiceResult[list[Asset]]:
        """Return assets whose name contains name_fragment, ignoring case."""
        assets = list(self._assets.find_by_name_containing_ignore_case(name_fragment))
        logger.debug(f"Asset search '{name_fragment}' matched {len(assets)}")
        return ServiceResult.ok(assets)

    def get(self, asset_id: int) -> ServiceResult[Asset]:
        try:
            return ServiceResult.ok(self._assets.get_by_id(asset_id))
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

    def update(self, asset_id: int, draft: AssetDraft) -> ServiceResult[Asset]:
        """Overwrite an asset's details, category and status.

        Status rules keep the employee reference consistent:
        - no status on the draft keeps the current one
        - AVAILABLE or RECOVERED is applied and clears the employee
        - ASSIGNED is only accepted when the asset is already assigned;
          moving into ASSIGNED requires assign() so an employee is attached
        """
        try:
            asset = self._assets.get_by_id(asset_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        category_id = draft.category.id if draft.category is not None else None
        if category_id is None:
            return ServiceResult.fail(ErrorKind.INVALID_INPUT, CATEGORY_REQUIRED_MESSAGE)

        try:
            category = self._categories.get_by_id(category_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        new_status = draft.assignment_status or asset.assignment_status
        if (
            new_status == AssignmentStatus.ASSIGNED
            and asset.assignment_status != AssignmentStatus.ASSIGNED
        ):
            logger.warning(f"Refused status change to ASSIGNED via update on asset {asset_id}")
            return ServiceResult.fail(
                ErrorKind.INVALID_STATE, "Use the assign operation to assign an asset"
            )

        asset.name = draft.name
        asset.purchase_date = draft.purchase_date
        asset.condition_notes = draft.condition_notes
        asset.category = category
        if new_status != asset.assignment_status:
            logger.info(
                f"Asset {asset_id} status {asset.assignment_status.value} -> "
                f"{new_status.value} via update"
            )
            asset.assignment_status = new_status
        if new_status != AssignmentStatus.ASSIGNED:
            asset.assigned_to = None

        return ServiceResult.ok(self._assets.save(asset))

    def delete(self, asset_id: int) -> ServiceResult[None]:
        """Delete an asset that is not currently assigned."""
        try:
            asset = self._assets.get_by_id(asset_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        if asset.assignment_status == AssignmentStatus.ASSIGNED:
            logger.warning(f"Refused to delete assigned asset {asset_id}")
            return ServiceResult.fail(
                ErrorKind.INVALID_STATE, "Cannot delete asset that is assigned."
            )

        self._assets.delete(asset)
        return ServiceResult.ok(None)

    def assign(self, asset_id: int, employee_id: int) -> ServiceResult[Asset]:
        """Assign an AVAILABLE or RECOVERED asset to an employee.

        Returns:
            NOT_FOUND if the asset or employee is missing,
            INVALID_STATE if the asset is already assigned.
        """
        try:
            asset = self._assets.get_by_id(asset_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        if asset.assignment_status == AssignmentStatus.ASSIGNED:
            logger.warning(f"Asset {asset_id} is already assigned to {asset.assigned_to_id}")
            return ServiceResult.fail(ErrorKind.INVALID_STATE, "Asset is already assigned")

        try:
            employee = self._employees.get_by_id(employee_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        asset.assignment_status = AssignmentStatus.ASSIGNED
        asset.assigned_to = employee
        asset = self._assets.save(asset)
        logger.info(f"Assigned asset {asset_id} to employee {employee_id}")
        return ServiceResult.ok(asset)

    def recover(self, asset_id: int) -> ServiceResult[Asset]:
        """Take an assigned asset back from its employee."""
        try:
            asset = self._assets.get_by_id(asset_id)
        except NotFoundError as e:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, str(e))

        if asset.assignment_status != AssignmentStatus.ASSIGNED:
            logger.warning(
                f"Asset {asset_id} cannot be recovered from {asset.assignment_status.value}"
            )
            return ServiceResult.fail(ErrorKind.INVALID_STATE, "Asset is not currently assigned")

        previous_holder = asset.assigned_to_id
        asset.assignment_status = AssignmentStatus.RECOVERED
        asset.assigned_to = None
        asset = self._assets.save(asset)
        logger.info(f"Recovered asset {asset_id} from employee {previous_holder}")
        return ServiceResult.ok(asset)

"""Tests for AssetLifecycleService."""

from datetime import date

from app.constants import AssignmentStatus, ErrorKind
from app.models import Asset, Category, Employee
from app.schemas.asset import AssetDraft
from app.schemas.category import CategoryReference
from app.schemas.employee import EmployeeReference


def _draft(category_id: int | None, **overrides) -> AssetDraft:
    data = {
        "name": "Laptop",
        "category": CategoryReference(id=category_id) if category_id is not None else None,
    }
    data.update(overrides)
    return AssetDraft(**data)


def _reload(db, asset_id: int) -> Asset:
    db.expire_all()
    return db.query(Asset).filter(Asset.id == asset_id).one()


class TestCreate:
    """create() validation and defaults."""

    def test_create_asset_available_in_category(self, asset_service, test_category):
        """A valid draft is stored AVAILABLE with its resolved category."""
        result = asset_service.create(_draft(test_category.id, purchase_date=date(2024, 5, 1)))

        assert result.success
        asset = result.value
        assert asset.id is not None
        assert asset.assignment_status == AssignmentStatus.AVAILABLE
        assert asset.category.id == test_category.id
        assert asset.category.name == "Electronics"
        assert asset.purchase_date == date(2024, 5, 1)
        assert asset.assigned_to is None

    def test_create_ignores_supplied_status_and_employee(
        self, asset_service, test_category, test_employee
    ):
        """Status is forced to AVAILABLE and the employee dropped."""
        for status in AssignmentStatus:
            draft = _draft(
                test_category.id,
                assignment_status=status,
                assigned_to=EmployeeReference(id=test_employee.id),
            )

            asset = asset_service.create(draft).unwrap()

            assert asset.assignment_status == AssignmentStatus.AVAILABLE
            assert asset.assigned_to is None
            assert asset.assigned_to_id is None

    def test_create_without_category(self, asset_service, db):
        result = asset_service.create(_draft(None))

        assert not result.success
        assert result.error.kind == ErrorKind.INVALID_INPUT
        assert "Category is required" in result.error.message
        assert db.query(Asset).count() == 0

    def test_create_with_category_missing_id(self, asset_service):
        result = asset_service.create(AssetDraft(name="Laptop", category=CategoryReference()))

        assert result.error.kind == ErrorKind.INVALID_INPUT

    def test_create_with_unknown_category(self, asset_service, db):
        """Category 999 does not exist."""
        result = asset_service.create(_draft(999))

        assert result.error.kind == ErrorKind.NOT_FOUND
        assert "Category not found" in result.error.message
        assert "999" in result.error.message
        assert db.query(Asset).count() == 0


class TestRead:
    """list_all(), search() and get()."""

    def test_list_is_repeatable(self, asset_service, test_asset):
        first = asset_service.list_all().unwrap()
        second = asset_service.list_all().unwrap()

        assert [a.id for a in first] == [a.id for a in second] == [test_asset.id]

    def test_list_empty(self, asset_service):
        assert asset_service.list_all().unwrap() == []

    def test_search_is_case_insensitive(self, asset_service, test_asset, test_category):
        asset_service.create(_draft(test_category.id, name="Monitor"))

        upper = asset_service.search("LAP").unwrap()
        lower = asset_service.search("lap").unwrap()

        assert {a.id for a in upper} == {a.id for a in lower} == {test_asset.id}

    def test_search_matches_substring(self, asset_service, test_category):
        asset_service.create(_draft(test_category.id, name="Gaming Laptop"))
        asset_service.create(_draft(test_category.id, name="Laptop Stand"))
        asset_service.create(_draft(test_category.id, name="Keyboard"))

        names = [a.name for a in asset_service.search("aptop").unwrap()]

        assert names == ["Gaming Laptop", "Laptop Stand"]

    def test_search_empty_fragment_matches_all(self, asset_service, test_asset, test_category):
        asset_service.create(_draft(test_category.id, name="Monitor"))

        assert len(asset_service.search("").unwrap()) == 2

    def test_search_treats_wildcards_literally(self, asset_service, test_category):
        asset_service.create(_draft(test_category.id, name="Cable 100% copper"))
        asset_service.create(_draft(test_category.id, name="Cable 100 m"))

        names = [a.name for a in asset_service.search("100%").unwrap()]

        assert names == ["Cable 100% copper"]

    def test_get_missing_asset(self, asset_service):
        result = asset_service.get(42)

        assert result.error.kind == ErrorKind.NOT_FOUND
        assert result.error.message == "Asset not found with id 42"


class TestAssign:
    """assign() transitions."""

    def test_assign_available_asset(self, asset_service, test_asset, test_employee):
        asset = asset_service.assign(test_asset.id, test_employee.id).unwrap()

        assert asset.assignment_status == AssignmentStatus.ASSIGNED
        assert asset.assigned_to.id == test_employee.id

    def test_assign_twice_rejected(self, asset_service, db, test_asset, test_employee):
        """Second assign fails and leaves the stored asset untouched."""
        other = Employee(id=2002, full_name="Daniel Okafor")
        db.add(other)
        db.commit()
        asset_service.assign(test_asset.id, test_employee.id).unwrap()

        result = asset_service.assign(test_asset.id, other.id)

        assert result.error.kind == ErrorKind.INVALID_STATE
        assert "already assigned" in result.error.message
        stored = _reload(db, test_asset.id)
        assert stored.assignment_status == AssignmentStatus.ASSIGNED
        assert stored.assigned_to_id == test_employee.id

    def test_assign_missing_asset(self, asset_service, test_employee):
        result = asset_service.assign(999, test_employee.id)

        assert result.error.kind == ErrorKind.NOT_FOUND
        assert "Asset not found" in result.error.message

    def test_assign_missing_employee(self, asset_service, db, test_asset):
        result = asset_service.assign(test_asset.id, 555)

        assert result.error.kind == ErrorKind.NOT_FOUND
        assert "Employee not found" in result.error.message
        assert _reload(db, test_asset.id).assignment_status == AssignmentStatus.AVAILABLE

    def test_status_checked_before_employee(self, asset_service, test_asset, test_employee):
        """An assigned asset reports InvalidState even for an unknown employee."""
        asset_service.assign(test_asset.id, test_employee.id).unwrap()

        result = asset_service.assign(test_asset.id, 555)

        assert result.error.kind == ErrorKind.INVALID_STATE

    def test_assign_recovered_asset(self, asset_service, test_asset, test_employee):
        """RECOVERED is a valid source state for assign."""
        asset_service.assign(test_asset.id, test_employee.id).unwrap()
        asset_service.recover(test_asset.id).unwrap()

        asset = asset_service.assign(test_asset.id, test_employee.id).unwrap()

        assert asset.assignment_status == AssignmentStatus.ASSIGNED
        assert asset.assigned_to_id == test_employee.id


class TestRecover:
    """recover() transitions."""

    def test_recover_assigned_asset(self, asset_service, db, test_asset, test_employee):
        asset_service.assign(test_asset.id, test_employee.id).unwrap()

        asset = asset_service.recover(test_asset.id).unwrap()

        assert asset.assignment_status == AssignmentStatus.RECOVERED
        assert asset.assigned_to is None
        assert _reload(db, test_asset.id).assigned_to_id is None

    def test_recover_twice_rejected(self, asset_service, test_asset, test_employee):
        asset_service.assign(test_asset.id, test_employee.id).unwrap()
        asset_service.recover(test_asset.id).unwrap()

        result = asset_service.recover(test_asset.id)

        assert result.error.kind == ErrorKind.INVALID_STATE
        assert "not currently assigned" in result.error.message

    def test_recover_never_assigned(self, asset_service, test_asset):
        result = asset_service.recover(test_asset.id)

        assert result.error.kind == ErrorKind.INVALID_STATE

    def test_recover_missing_asset(self, asset_service):
        result = asset_service.recover(7)

        assert result.error.kind == ErrorKind.NOT_FOUND
        assert "Asset not found" in result.error.message


class TestDelete:
    """delete() guard."""

    def test_delete_available_asset(self, asset_service, db, test_asset):
        result = asset_service.delete(test_asset.id)

        assert result.success
        assert result.value is None
        assert db.query(Asset).count() == 0

    def test_delete_assigned_asset_rejected(self, asset_service, db, test_asset, test_employee):
        asset_service.assign(test_asset.id, test_employee.id).unwrap()

        result = asset_service.delete(test_asset.id)

        assert result.error.kind == ErrorKind.INVALID_STATE
        assert "Cannot delete asset that is assigned" in result.error.message
        stored = _reload(db, test_asset.id)
        assert stored.assignment_status == AssignmentStatus.ASSIGNED
        assert stored.assigned_to_id == test_employee.id

    def test_delete_after_recover(self, asset_service, db, test_asset, test_employee):
        asset_service.assign(test_asset.id, test_employee.id).unwrap()
        asset_service.recover(test_asset.id).unwrap()

        assert asset_service.delete(test_asset.id).success
        assert db.query(Asset).filter(Asset.id == test_asset.id).first() is None

    def test_delete_missing_asset(self, asset_service):
        result = asset_service.delete(3)

        assert result.error.kind == ErrorKind.NOT_FOUND
        assert "Asset not found" in result.error.message


class TestUpdate:
    """update() overwrites and status rules."""

    def test_update_overwrites_fields(self, asset_service, db, test_asset):
        furniture = Category(name="Furniture")
        db.add(furniture)
        db.commit()

        draft = _draft(
            furniture.id,
            name="Updated Laptop",
            condition_notes="Good condition",
            purchase_date=None,
        )
        asset = asset_service.update(test_asset.id, draft).unwrap()

        assert asset.name == "Updated Laptop"
        assert asset.condition_notes == "Good condition"
        assert asset.purchase_date is None
        assert asset.category.id == furniture.id
        assert asset.assignment_status == AssignmentStatus.AVAILABLE

    def test_update_missing_asset(self, asset_service, test_category):
        result = asset_service.update(999, _draft(test_category.id))

        assert result.error.kind == ErrorKind.NOT_FOUND
        assert "Asset not found" in result.error.message

    def test_update_unknown_category_changes_nothing(self, asset_service, db, test_asset):
        result = asset_service.update(test_asset.id, _draft(999, name="Renamed"))

        assert result.error.kind == ErrorKind.NOT_FOUND
        assert "Category not found" in result.error.message
        stored = _reload(db, test_asset.id)
        assert stored.name == "Laptop"
        assert stored.condition_notes == "New"

    def test_update_without_category(self, asset_service, test_asset):
        result = asset_service.update(test_asset.id, _draft(None))

        assert result.error.kind == ErrorKind.INVALID_INPUT

    def test_update_keeps_status_when_omitted(
        self, asset_service, test_asset, test_category, test_employee
    ):
        asset_service.assign(test_asset.id, test_employee.id).unwrap()

        asset = asset_service.update(test_asset.id, _draft(test_category.id)).unwrap()

        assert asset.assignment_status == AssignmentStatus.ASSIGNED
        assert asset.assigned_to_id == test_employee.id

    def test_update_to_recovered_clears_employee(
        self, asset_service, test_asset, test_category, test_employee
    ):
        asset_service.assign(test_asset.id, test_employee.id).unwrap()

        draft = _draft(test_category.id, assignment_status=AssignmentStatus.RECOVERED)
        asset = asset_service.update(test_asset.id, draft).unwrap()

        assert asset.assignment_status == AssignmentStatus.RECOVERED
        assert asset.assigned_to is None

    def test_update_cannot_move_into_assigned(self, asset_service, db, test_asset, test_category):
        """ASSIGNED without an employee would break the assignment invariant."""
        draft = _draft(test_category.id, assignment_status=AssignmentStatus.ASSIGNED)

        result = asset_service.update(test_asset.id, draft)

        assert result.error.kind == ErrorKind.INVALID_STATE
        assert _reload(db, test_asset.id).assignment_status == AssignmentStatus.AVAILABLE

    def test_update_assigned_stays_assigned(
        self, asset_service, test_asset, test_category, test_employee
    ):
        asset_service.assign(test_asset.id, test_employee.id).unwrap()

        draft = _draft(test_category.id, assignment_status=AssignmentStatus.ASSIGNED)
        asset = asset_service.update(test_asset.id, draft).unwrap()

        assert asset.assignment_status == AssignmentStatus.ASSIGNED
        assert asset.assigned_to_id == test_employee.id

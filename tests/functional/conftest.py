"""Default marks for tests under `tests/functional/`."""

from tests.fixtures.markers import mark_folder

pytest_collection_modifyitems = mark_folder(__file__, "functional")

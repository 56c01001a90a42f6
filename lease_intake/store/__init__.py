"""Contract state management: pure collection operations and the editing session."""

from lease_intake.store.operations import (
    add_party,
    add_representative,
    attach_files,
    attach_property_files,
    detach_file,
    detach_property_file,
    find_party,
    get_party,
    new_contract,
    remove_party,
    remove_representative,
    set_guarantee_type,
    set_insurance_selection,
    update_contract,
    update_party,
    update_representative,
)
from lease_intake.store.session import ContractSession

__all__ = [
    "ContractSession",
    "add_party",
    "add_representative",
    "attach_files",
    "attach_property_files",
    "detach_file",
    "detach_property_file",
    "find_party",
    "get_party",
    "new_contract",
    "remove_party",
    "remove_representative",
    "set_guarantee_type",
    "set_insurance_selection",
    "update_contract",
    "update_party",
    "update_representative",
]

from .admin_shell import AdminShell
from .auth_service import AuthService
from .data_service import DataService
from .edit_form import EditForm
from .entity_page import EntityPage
from .entity_store import EntityStore
from .list_view import ListView, ListViewState, derive_view, filter_options, page_range

__all__ = [
    "AdminShell",
    "AuthService",
    "DataService",
    "EditForm",
    "EntityPage",
    "EntityStore",
    "ListView",
    "ListViewState",
    "derive_view",
    "filter_options",
    "page_range",
]

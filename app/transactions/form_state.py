"""
Add/edit form state for a transaction.

The caller owns the state object: ``AddMode`` while entering a new
transaction, ``EditMode`` while changing a stored one. States are immutable;
``change`` returns a new state of the same kind.
"""
from dataclasses import dataclass, fields as dataclass_fields, replace

from tariffs.cost import categories_for, is_valid_category
from tariffs.exceptions import UnknownTariff
from transactions.store import create_transaction, get_transaction, update_transaction

FIELDS = ('amount', 'transaction_type', 'category')
MISSING_FIELDS = "Please fill in all fields before submitting."


class FormError(Exception):
    pass


@dataclass(frozen=True)
class AddMode:
    amount: str = ''
    transaction_type: str = ''
    category: str = ''

    title = 'Add Transaction'
    action = 'Add Transaction'


@dataclass(frozen=True)
class EditMode:
    transaction_id: int
    amount: str = ''
    transaction_type: str = ''
    category: str = ''

    title = 'Edit Transaction'
    action = 'Update Transaction'


def reset():
    return AddMode()


def edit(transaction):
    return EditMode(
        transaction_id=transaction.id,
        amount=str(transaction.amount),
        transaction_type=transaction.transaction_type,
        category=transaction.category,
    )


def change(state, name, value):
    if name not in FIELDS:
        raise KeyError(name)

    changes = {name: value}
    # a category only makes sense for the type it was picked under
    if name == 'transaction_type' and not is_valid_category(value, state.category):
        changes['category'] = ''
    return replace(state, **changes)


def category_options(state):
    if not state.transaction_type:
        return ()
    try:
        return categories_for(state.transaction_type)
    except UnknownTariff:
        return ()


def form_data(state):
    return {field.name: getattr(state, field.name) for field in dataclass_fields(state) if field.name in FIELDS}


def validate_form(state):
    if any(not str(value).strip() for value in form_data(state).values()):
        raise FormError(MISSING_FIELDS)


def submit(state, user):
    """
    Save the form and return the stored Transaction.

    Raises FormError for blank fields and rest_framework's ValidationError
    when the store rejects the values.
    """
    validate_form(state)
    if isinstance(state, EditMode):
        return update_transaction(user, state.transaction_id, form_data(state))
    return get_transaction(user, create_transaction(user, form_data(state)))

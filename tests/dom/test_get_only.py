# tests/dom/test_get_only.py
import pytest

from viewprobe.dom.core import LookupKind
from viewprobe.dom.results import OnlyStatus
from viewprobe.exceptions import TooManyElementsFoundException
from viewprobe.rendering.template import Template


@pytest.fixture
def unique_view(configuration, hello_model):
    return Template.render("MultipleUniqueIds.html", configuration, hello_model)


@pytest.fixture
def duplicate_view(configuration, hello_model):
    return Template.render("MultipleDuplicateIds.html", configuration, hello_model)


@pytest.fixture
def article_view(configuration, article_model):
    return Template.render("Article.html", configuration, article_model)


@pytest.fixture
def form_view(configuration):
    return Template.render("LoginForm.html", configuration)


# --- by_id ---

def test_by_id_it_can_get(unique_view):
    """Test of een uniek id het juiste element oplevert."""
    assert unique_view.get_only.by_id("div-1").text == "My Div One, Hello World"


def test_by_id_raises_when_more_than_one_element_found(duplicate_view):
    """Test of dubbele id's een TooManyElementsFoundException opleveren."""
    with pytest.raises(TooManyElementsFoundException) as exc_info:
        duplicate_view.get_only.by_id("div-1")

    assert exc_info.value.kind is LookupKind.ID
    assert exc_info.value.key == "div-1"
    assert exc_info.value.count == 2
    assert "div-1" in str(exc_info.value)


def test_by_id_returns_none_when_no_element_found(unique_view):
    """Test of een onbekend id None oplevert in plaats van een fout."""
    assert unique_view.get_only.by_id("not-a-real-id") is None


# --- by_test_id ---

def test_by_test_id_it_can_get(article_view):
    assert article_view.get_only.by_test_id("first-h2").text == "A cool title"


def test_by_test_id_raises_when_more_than_one_element_found(duplicate_view):
    with pytest.raises(TooManyElementsFoundException):
        duplicate_view.get_only.by_test_id("my-test-id")


def test_by_test_id_returns_none_when_no_element_found(unique_view):
    assert unique_view.get_only.by_test_id("not-a-real-id") is None


# --- by_type ---

def test_by_type_it_can_get(article_view):
    assert article_view.get_only.by_type("h1").text == "Now this is a story!"


def test_by_type_raises_when_more_than_one_element_found(duplicate_view):
    with pytest.raises(TooManyElementsFoundException):
        duplicate_view.get_only.by_type("div")


def test_by_type_returns_none_when_no_element_found(unique_view):
    assert unique_view.get_only.by_type("not-real") is None


# --- by_partial_name ---

def test_by_partial_name_it_can_get(article_view):
    """Test of de partial zelf als element teruggevonden wordt."""
    partial = article_view.get_only.by_partial_name("_PartialName.html")

    assert partial is not None
    assert partial.tag == "partial"
    assert "Aaron Buckley - Thanks for reading" in partial.text


def test_by_partial_name_raises_when_more_than_one_element_found(duplicate_view):
    with pytest.raises(TooManyElementsFoundException) as exc_info:
        duplicate_view.get_only.by_partial_name("common-partial")

    assert exc_info.value.kind is LookupKind.PARTIAL_NAME


def test_by_partial_name_returns_none_when_no_element_found(unique_view):
    assert unique_view.get_only.by_partial_name("not-real") is None


# --- asp-* bindings ---

def test_by_asp_action_it_can_get(form_view):
    assert form_view.get_only.by_asp_action("Login").tag == "form"


def test_by_asp_for_raises_for_label_and_input(form_view):
    """Een label en een input met hetzelfde asp-for zijn dubbelzinnig."""
    with pytest.raises(TooManyElementsFoundException):
        form_view.get_only.by_asp_for("Email")


def test_by_asp_controller_raises_when_more_than_one_element_found(form_view):
    with pytest.raises(TooManyElementsFoundException):
        form_view.get_only.by_asp_controller("Account")


def test_by_asp_controller_it_can_get(form_view):
    assert form_view.get_only.by_asp_controller("Home").text == "Back"


def test_by_asp_returns_none_when_no_element_found(form_view):
    assert form_view.get_only.by_asp_for("Username") is None
    assert form_view.get_only.by_asp_action("Logout") is None
    assert form_view.get_only.by_asp_controller("Admin") is None


# --- classes ---

def test_it_can_get_complex_classes(configuration, hello_model):
    view = Template.render("ComplexClasses.html", configuration, hello_model)
    expected_classes = ("cool-class-a", "another-class", "col-12")
    assert view.get_only.by_id("a-lot-of-classes").classes == expected_classes


# --- tagged result ---

def test_resolve_returns_tagged_results(unique_view, duplicate_view):
    """Test de drie uitkomsten van resolve zonder dat er iets gegooid wordt."""
    found = unique_view.get_only.resolve(LookupKind.ID, "div-1")
    absent = unique_view.get_only.resolve(LookupKind.ID, "nope")
    ambiguous = duplicate_view.get_only.resolve(LookupKind.ID, "div-1")

    assert found.status is OnlyStatus.FOUND
    assert found.element.text == "My Div One, Hello World"
    assert absent.status is OnlyStatus.ABSENT
    assert absent.element is None
    assert ambiguous.status is OnlyStatus.AMBIGUOUS
    assert ambiguous.count == 2
    assert ambiguous.element is None

    with pytest.raises(TooManyElementsFoundException):
        ambiguous.unwrap()

from fabricator_assemble.assembly import wrap_page


class TestWrapPage:
    def test_replaces_placeholder(self):
        assert wrap_page("INNER", "<div>{% body %}</div>") == "<div>INNER</div>"

    def test_placeholder_without_spaces(self):
        assert wrap_page("INNER", "<div>{%body%}</div>") == "<div>INNER</div>"

    def test_replaces_every_placeholder(self):
        assert wrap_page("x", "{% body %}|{% body %}") == "x|x"

    def test_without_wrapper_returns_page(self):
        assert wrap_page("page", None) == "page"
        assert wrap_page("page", "") == "page"

    def test_wrapper_without_placeholder_is_unchanged(self):
        assert wrap_page("page", "<div></div>") == "<div></div>"

    def test_page_is_inserted_literally(self):
        page = r"\1 \g<0> {% body %}"

        assert wrap_page(page, "[{% body %}]") == f"[{page}]"

    def test_wider_spacing_is_not_a_placeholder(self):
        assert wrap_page("x", "{%  body  %}") == "{%  body  %}"

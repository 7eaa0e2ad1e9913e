from __future__ import annotations

from django.template import Context, Template, TemplateSyntaxError
from django.test import RequestFactory, SimpleTestCase
from django.urls import resolve


def render(source, request=None, **extra):
    context = dict(extra)
    if request is not None:
        context["request"] = request
    return Template("{% load active_link %}" + source).render(Context(context))


def make_request(path, data=None):
    request = RequestFactory().get(path, data or {})
    request.resolver_match = resolve(request.path_info)
    return request


class ActiveLinkTagTests(SimpleTestCase):
    def test_active_link_to_tag(self):
        html = render(
            '{% active_link_to "Users" "users:list" class="nav-link" data_toggle="tab" %}',
            make_request("/users/5/"),
        )
        self.assertHTMLEqual(
            html,
            '<a href="/users/" class="nav-link active" aria-current="page" '
            'data-toggle="tab">Users</a>',
        )

    def test_url_args_and_exclusive(self):
        html = render(
            '{% active_link_to "Edit" "users:edit" user_pk active="exclusive" class_inactive="off" %}',
            make_request("/users/5/"),
            user_pk=5,
        )
        self.assertHTMLEqual(html, '<a href="/users/5/edit/" class="off">Edit</a>')

    def test_controller_action_condition_from_context(self):
        html = render(
            '{% active_link_to "People" "/people/" active=sections %}',
            make_request("/users/5/edit/"),
            sections=[["users"], ["detail", "edit"]],
        )
        self.assertIn('class="active"', html)

    def test_block_form_uses_rendered_content(self):
        html = render(
            '{% active_link "backoffice:reports" wrap_tag="li" %}'
            "<i>{{ label }}</i>{% endactive_link %}",
            make_request("/admin/reports/"),
            label="Reports",
        )
        self.assertHTMLEqual(
            html,
            '<li class="active"><a href="/admin/reports/" class="active" '
            'aria-current="page"><i>Reports</i></a></li>',
        )

    def test_block_form_requires_target(self):
        with self.assertRaises(TemplateSyntaxError):
            render("{% active_link %}x{% endactive_link %}")

    def test_class_and_predicate_tags(self):
        request = make_request("/search/", {"q": "a"})
        html = render(
            "{% active_link_class '/search/?q=a' active='exact' class_inactive='idle' %}|"
            "{% active_link_class 'users:list' class_inactive='idle' %}|"
            "{% is_active_link 'search' as on_search %}{{ on_search }}",
            request,
        )
        self.assertEqual(html, "active|idle|True")

    def test_pattern_filter(self):
        html = render(
            "{% with pattern='^/admin'|active_pattern %}"
            "{% active_link_class '/elsewhere/' active=pattern %}{% endwith %}",
            make_request("/admin/reports/"),
        )
        self.assertEqual(html, "active")

    def test_active_nav(self):
        request = make_request("/users/5/")
        self.assertEqual(render("{% active_nav '/admin/' '' '/users/' %}", request), "active")
        self.assertEqual(render("{% active_nav '/admin/' css_class='on' %}", request), "")
        self.assertEqual(render("{% active_nav '/users/' css_class='on' %}", request), "on")

    def test_without_request_links_are_inactive(self):
        self.assertEqual(render("{% active_nav '/' %}"), "")
        self.assertHTMLEqual(render('{% active_link_to "Home" "/" %}'), '<a href="/" class="">Home</a>')


class NavDemoPageTests(SimpleTestCase):
    def test_users_section(self):
        response = self.client.get("/users/5/")
        self.assertEqual(response.status_code, 200)
        self.assertContains(
            response,
            '<li class="nav-item"><a href="/" class="nav-link">Home</a></li>',
            html=True,
        )
        self.assertContains(
            response,
            '<li class="nav-item active"><a href="/users/" class="nav-link active" '
            'aria-current="page">Users</a></li>',
            html=True,
        )
        self.assertContains(
            response,
            '<li class="nav-item"><a href="/admin/" class=""><strong>Admin</strong></a></li>',
            html=True,
        )
        self.assertContains(
            response,
            '<a href="/search/?q=all" data-section="search" class="">Search</a>',
            html=True,
        )
        self.assertContains(response, '<p id="users-section" class="section-on">Users section</p>', html=True)

    def test_admin_link_is_disabled_when_active(self):
        response = self.client.get("/admin/")
        self.assertContains(
            response,
            '<li class="nav-item active"><span class="active" aria-current="page">'
            "<strong>Admin</strong></span></li>",
            html=True,
        )
        self.assertNotContains(response, 'href="/admin/"')

    def test_home_is_exclusive(self):
        response = self.client.get("/")
        self.assertContains(
            response,
            '<li class="nav-item active"><a href="/" class="nav-link active" '
            'aria-current="page">Home</a></li>',
            html=True,
        )
        self.assertContains(response, '<p id="users-section" class="">Users section</p>', html=True)

    def test_search_pattern_matches_full_path(self):
        response = self.client.get("/search/", {"q": "all"})
        self.assertContains(
            response,
            '<a href="/search/?q=all" data-section="search" class="active" aria-current="page">'
            "Search</a>",
            html=True,
        )

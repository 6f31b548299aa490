from app.services.docs_urls import project_docs_url, project_logo_url


def test_logo_url():
    assert project_logo_url("alpha") == "/doc/alpha/logo"


def test_docs_url_with_and_without_path():
    assert project_docs_url("alpha", "1.0.0") == "/doc/alpha/1.0.0/"
    assert project_docs_url("alpha", "latest", "guide/index.html") == "/doc/alpha/latest/guide/index.html"

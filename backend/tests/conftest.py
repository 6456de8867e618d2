"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from codecoach.config import get_settings
from codecoach.database import get_engine, get_session_maker

# Sample JavaScript code for testing
SAMPLE_JS_BAD = "eval(userInput); var x = 1; if (x == 1) { console.log(x); }"

SAMPLE_JS_GOOD = "export const add = (a, b) => a + b;"

SAMPLE_JS_DOCUMENTED = '''
import { fetchUser } from "./api";

/**
 * Load a user and render their name.
 */
export async function showUser(id) {
  try {
    const user = await fetchUser(id);
    // textContent avoids HTML injection
    document.getElementById("name").textContent = user.name;
  } catch (err) {
    report(err);
  }
}
'''

SAMPLE_JS_DOM = '''
function render(items) {
  for (var i = 0; i < items.length; i++) {
    document.querySelector(".list").innerHTML = items[i];
  }
  document.write("<p>done</p>");
}
'''

SAMPLE_PYTHON = '''
def total(values):
    """Sum the values."""
    squares = [v * v for v in values]
    for i in range(len(values)):
        print(values[i])
    return sum(squares)


if __name__ == "__main__":
    total([1, 2, 3])
'''

SAMPLE_JAVA = '''
public class App {
    @Override
    public String toString() { return "app"; }

    public static void main(String[] args) {
        System.out.println("hello");
    }
}
'''


@pytest.fixture
def sample_js_bad():
    """Snippet hitting security and best-practice rules."""
    return SAMPLE_JS_BAD


@pytest.fixture
def sample_js_good():
    """Snippet matching no rule."""
    return SAMPLE_JS_GOOD


@pytest.fixture
def sample_js_documented():
    """Module with doc comments, async code and error handling."""
    return SAMPLE_JS_DOCUMENTED


@pytest.fixture
def sample_js_dom():
    """DOM-heavy snippet hitting performance and security rules."""
    return SAMPLE_JS_DOM


@pytest.fixture
def sample_python():
    """Python script sample."""
    return SAMPLE_PYTHON


@pytest.fixture
def sample_java():
    """Java class sample."""
    return SAMPLE_JAVA


def _clear_caches():
    get_settings.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()


@pytest.fixture
def client():
    """Test client with database startup and shutdown mocked out."""
    with patch("codecoach.main.init_db", new_callable=AsyncMock), patch(
        "codecoach.main.close_db", new_callable=AsyncMock
    ):
        from codecoach.main import app

        with TestClient(app) as client:
            yield client


@pytest.fixture
def db_client(tmp_path, monkeypatch):
    """Test client backed by a temporary SQLite database."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    _clear_caches()

    from codecoach.main import app

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
    _clear_caches()

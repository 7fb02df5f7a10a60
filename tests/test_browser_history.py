from linkwise.browser_history import BrowserHistory


def test_worked_example():
    history = BrowserHistory("home.example")
    history.visit("alpha.example")
    history.visit("beta.example")
    history.visit("gamma.example")
    assert history.back(1) == "beta.example"
    assert history.back(1) == "alpha.example"
    assert history.forward(1) == "beta.example"
    history.visit("delta.example")
    assert history.forward(2) == "delta.example"
    assert history.back(2) == "alpha.example"
    assert history.back(7) == "home.example"


def test_back_without_history_stays_on_homepage():
    history = BrowserHistory("home.example")
    assert history.back(3) == "home.example"
    assert history.forward(3) == "home.example"


def test_visit_clears_forward_history():
    history = BrowserHistory("home.example")
    history.visit("a.example")
    history.back(1)
    history.visit("b.example")
    assert history.forward(5) == "b.example"
    assert history.back(1) == "home.example"


def test_zero_steps_does_not_move():
    history = BrowserHistory("home.example")
    history.visit("a.example")
    assert history.back(0) == "a.example"
    assert history.current == "a.example"


def test_back_then_forward_round_trip():
    history = BrowserHistory("p0")
    pages = [f"p{i}" for i in range(1, 6)]
    for page in pages:
        history.visit(page)
    assert history.back(len(pages)) == "p0"
    assert history.forward(len(pages)) == pages[-1]
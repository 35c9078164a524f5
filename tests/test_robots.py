from simple_crawler.crawler.robots import RobotsPolicy

ROBOTS = """\
User-agent: Googlebot
Disallow: /google-only

User-agent: *
Disallow: /private
Disallow: /tmp/
Allow: /public
Disallow:

User-agent: BadBot
Disallow: /
"""


def test_only_wildcard_block_is_used():
    policy = RobotsPolicy.parse(ROBOTS, "http", "example.com")
    assert policy.rules == {"http://example.com/private", "http://example.com/tmp/"}
    assert len(policy) == 2


def test_exact_match_blocking():
    policy = RobotsPolicy.parse(ROBOTS, "http", "example.com")
    assert policy.is_blocked("http://example.com/private")
    assert not policy.is_blocked("http://example.com/private/page")
    assert not policy.is_blocked("http://example.com/public")


def test_prefix_match_blocking():
    policy = RobotsPolicy.parse(ROBOTS, "http", "example.com", prefix_match=True)
    assert policy.is_blocked("http://example.com/private")
    assert policy.is_blocked("http://example.com/private/page")
    assert policy.is_blocked("http://example.com/tmp/x")
    assert not policy.is_blocked("http://example.com/tmp")


def test_no_wildcard_block_means_no_rules():
    policy = RobotsPolicy.parse("User-agent: Googlebot\nDisallow: /x\n", "http", "example.com")
    assert len(policy) == 0
    assert not policy.is_blocked("http://example.com/x")


def test_empty_and_crlf_documents():
    assert len(RobotsPolicy.parse("", "http", "example.com")) == 0
    assert len(RobotsPolicy.empty()) == 0
    policy = RobotsPolicy.parse("User-agent: *\r\nDisallow: /private\r\n", "https", "example.com")
    assert policy.rules == {"https://example.com/private"}


def test_second_wildcard_block_does_not_stop_scan():
    text = "User-agent: *\nDisallow: /a\nUser-agent: *\nDisallow: /b\nUser-agent: other\nDisallow: /c\n"
    policy = RobotsPolicy.parse(text, "http", "example.com")
    assert policy.rules == {"http://example.com/a", "http://example.com/b"}

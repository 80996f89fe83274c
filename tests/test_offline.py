"""
Tests for the offline asset caching policy.
"""

from unittest import TestCase, main

from cyberpunk2048.offline import AssetRequest, CacheGeneration, SHELL_ASSETS, Strategy, origin_of, route

ORIGIN = "https://play.example.com"


class TestRoute(TestCase):
    def test_navigation_falls_back_to_shell(self):
        request = AssetRequest(f"{ORIGIN}/", mode="navigate", destination="document")
        self.assertIs(route(request, ORIGIN), Strategy.NETWORK_FIRST_SHELL)

    def test_same_origin_code_is_network_first(self):
        for destination in ("script", "style", "document"):
            with self.subTest(destination=destination):
                request = AssetRequest(f"{ORIGIN}/game.js", destination=destination)
                self.assertIs(route(request, ORIGIN), Strategy.NETWORK_FIRST)

    def test_other_same_origin_assets_are_cache_first(self):
        request = AssetRequest(f"{ORIGIN}/icons/icon.svg", destination="image")
        self.assertIs(route(request, ORIGIN + "/"), Strategy.CACHE_FIRST_REVALIDATE)

    def test_fonts_are_stale_while_revalidate(self):
        for url in ("https://fonts.googleapis.com/css2?family=Orbitron", "https://fonts.gstatic.com/s/orbitron.woff2"):
            with self.subTest(url=url):
                self.assertIs(route(AssetRequest(url, destination="font"), ORIGIN), Strategy.STALE_WHILE_REVALIDATE)

    def test_other_origins_pass_through(self):
        request = AssetRequest("https://cdn.example.net/lib.js", destination="script")
        self.assertIs(route(request, ORIGIN), Strategy.PASSTHROUGH)

    def test_port_is_part_of_origin(self):
        self.assertEqual(origin_of("http://localhost:8000/index.html"), "http://localhost:8000")
        request = AssetRequest("http://localhost:9000/style.css", destination="style")
        self.assertIs(route(request, "http://localhost:8000"), Strategy.PASSTHROUGH)

    def test_default_ports_are_dropped(self):
        self.assertEqual(origin_of("http://x:80/a"), "http://x")
        self.assertEqual(origin_of("HTTPS://Play.Example.com:443/"), ORIGIN)
        self.assertEqual(origin_of("https://x:80/a"), "https://x:80")

        request = AssetRequest("https://play.example.com:443/game.js", destination="script")
        self.assertIs(route(request, ORIGIN), Strategy.NETWORK_FIRST)
        request = AssetRequest(f"{ORIGIN}/game.js", destination="script")
        self.assertIs(route(request, "https://play.example.com:443"), Strategy.NETWORK_FIRST)


class TestCacheGeneration(TestCase):
    def test_names(self):
        generation = CacheGeneration(version=2)
        self.assertEqual(generation.asset_cache, "cyberpunk-2048-v2")
        self.assertEqual(generation.font_cache, "cyberpunk-2048-fonts-v2")
        self.assertEqual(generation.cache_for(Strategy.STALE_WHILE_REVALIDATE), "cyberpunk-2048-fonts-v2")
        self.assertEqual(generation.cache_for(Strategy.NETWORK_FIRST), "cyberpunk-2048-v2")

    def test_activation_drops_previous_generations(self):
        generation = CacheGeneration(version=2)
        names = ["cyberpunk-2048-v1", "cyberpunk-2048-fonts-v1", "cyberpunk-2048-v2", "cyberpunk-2048-fonts-v2"]
        self.assertEqual(generation.stale(names), ["cyberpunk-2048-v1", "cyberpunk-2048-fonts-v1"])

    def test_shell_is_precached(self):
        self.assertIn("index.html", CacheGeneration(version=1).assets)
        # ##>: The root is requested both with and without the leading dot.
        self.assertIn("/", SHELL_ASSETS)
        self.assertIn("./", SHELL_ASSETS)


if __name__ == "__main__":
    main()

import unittest

from toc_builder.title import extract_market_name


class ExtractMarketNameTests(unittest.TestCase):
    def test_strips_market_and_trailing_words(self) -> None:
        self.assertEqual(extract_market_name("Electric Vehicle Market"), "Electric Vehicle")
        self.assertEqual(extract_market_name("Digital Health Market Report 2024"), "Digital Health")
        self.assertEqual(
            extract_market_name("3D Printing in Healthcare Market"),
            "3D Printing in Healthcare",
        )

    def test_strips_leading_global(self) -> None:
        self.assertEqual(extract_market_name("Global Drone Market"), "Drone")
        self.assertEqual(
            extract_market_name("Global AI-Powered Diagnostics Market 2024"),
            "AI-Powered Diagnostics",
        )

    def test_global_qualifier_need_not_lead(self) -> None:
        self.assertEqual(extract_market_name("2024 Global Drone Market"), "Drone")
        self.assertEqual(extract_market_name("The Global Smart Glass Market Outlook"), "Smart Glass")

    def test_market_is_case_insensitive_whole_word(self) -> None:
        self.assertEqual(extract_market_name("Smart Home market size"), "Smart Home")
        self.assertEqual(extract_market_name("Digital Marketing Tools"), "Digital Marketing Tools")

    def test_title_without_qualifier_is_unchanged(self) -> None:
        self.assertEqual(extract_market_name("Wearables"), "Wearables")
        self.assertEqual(extract_market_name("  Wearables  "), "Wearables")

    def test_empty_input_yields_empty_output(self) -> None:
        self.assertEqual(extract_market_name(""), "")
        self.assertEqual(extract_market_name("   "), "")


if __name__ == "__main__":
    unittest.main()

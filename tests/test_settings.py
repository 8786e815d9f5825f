from dataclasses import FrozenInstanceError
import unittest

from cadastro.config.settings import Settings, _flag, _split_csv


class SettingsTests(unittest.TestCase):
    def test_split_csv(self):
        self.assertEqual(_split_csv(" a, b,,c "), ("a", "b", "c"))

    def test_flag(self):
        self.assertTrue(_flag("1"))
        self.assertTrue(_flag("True"))
        self.assertFalse(_flag("0"))
        self.assertFalse(_flag(""))

    def test_settings_are_frozen(self):
        cfg = Settings(firebase_project_id="demo", clients_collection="clientes_teste")
        self.assertEqual(cfg.clients_collection, "clientes_teste")
        with self.assertRaises(FrozenInstanceError):
            cfg.firebase_project_id = "other"


if __name__ == "__main__":
    unittest.main()

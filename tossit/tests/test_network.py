import unittest
from tossit.utilities import network


class TestNetwork(unittest.TestCase):

    def test_module_is_documented(self):
        self.assertIn("LAN", network.__doc__ or "")

    def test_local_ip_is_a_string(self):
        ip = network.get_local_ip()
        self.assertIsInstance(ip, str)
        self.assertEqual(len(ip.split(".")), 4)

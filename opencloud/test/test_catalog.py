from unittest import TestCase

from ..catalog import Catalog, CatalogService, find_endpoint
from ..errors import EndpointError
from ..service import Endpoint
from .util import (
    CATALOG,
    COMPUTE_ORD_URL,
    COMPUTE_URL,
    DNS_URL,
    VOLUME_PRIVATE_URL,
    VOLUME_URL,
)


#: The same volume service as an Identity v3 catalog entry
V3_ENTRY = {
    "id": "abcdef",
    "name": "cinder",
    "type": "volumev3",
    "endpoints": [
        {"region_id": "RegionOne", "interface": "public", "url": "https://cloud/v3/1"},
        {"region_id": "RegionOne", "interface": "internal", "url": "https://int/v3/1"},
        {"region_id": "RegionOne", "interface": "admin", "url": "https://adm/v3/1"},
        {"region_id": "RegionTwo", "interface": "public", "url": "https://two/v3/1"},
    ],
}


class CatalogTestCase(TestCase):

    def test_from_v2_entries(self):
        catalog = Catalog.from_data(CATALOG)
        self.assertEqual(len(catalog), 4)
        service = catalog.get_items()[0]
        self.assertTrue(service.has_type("compute"))
        self.assertTrue(service.has_name("cloudServersOpenStack"))
        self.assertFalse(service.has_name("cloudServers"))

    # Check that a whole token response can be given
    def test_from_token_bodies(self):
        v2 = Catalog.from_data({"access": {"serviceCatalog": CATALOG}})
        self.assertEqual(len(v2), 4)
        v3 = Catalog.from_data({"token": {"catalog": [V3_ENTRY]}})
        self.assertEqual(len(v3), 1)

    # Check that v3 endpoints are grouped by region into URL types
    def test_from_v3_entries(self):
        service = Catalog.from_data([V3_ENTRY]).get_items()[0]
        self.assertEqual(
            service.get_endpoint_from_region("RegionOne"),
            {
                "region": "RegionOne",
                "publicURL": "https://cloud/v3/1",
                "internalURL": "https://int/v3/1",
                "adminURL": "https://adm/v3/1",
            }
        )
        self.assertEqual(
            service.get_endpoint_from_region("RegionTwo"),
            {"region": "RegionTwo", "publicURL": "https://two/v3/1"}
        )

    def test_endpoint_from_region(self):
        service = CatalogService.from_data(CATALOG[0])
        self.assertEqual(service.get_endpoint_from_region("ORD")["region"], "ORD")
        self.assertIsNone(service.get_endpoint_from_region("LON"))

    # Check that an endpoint without a region matches any region
    def test_global_endpoint(self):
        service = CatalogService.from_data(CATALOG[3])
        self.assertEqual(service.get_endpoint_from_region("LON")["publicURL"], DNS_URL)


class FindEndpointTestCase(TestCase):

    def setUp(self):
        self.catalog = Catalog.from_data(CATALOG)

    def test_found(self):
        endpoint = find_endpoint(
            self.catalog,
            "volume",
            "cloudBlockStorage",
            "DFW",
            "publicURL"
        )
        self.assertEqual(endpoint, Endpoint(VOLUME_URL, VOLUME_PRIVATE_URL, "DFW"))

    # Check that trailing slashes are removed from the URLs
    def test_found_strips_slash(self):
        endpoint = find_endpoint(
            self.catalog,
            "compute",
            "cloudServersOpenStack",
            "ORD",
            "publicURL"
        )
        self.assertEqual(endpoint.public_url, COMPUTE_ORD_URL)
        self.assertIsNone(endpoint.private_url)

    # Check that a service without a name matches on type alone
    def test_found_without_name(self):
        endpoint = find_endpoint(self.catalog, "compute", None, "DFW", "publicURL")
        self.assertEqual(endpoint.public_url, COMPUTE_URL)

    # Check that every combination that is absent gives an error naming all four values
    def test_not_found(self):
        absent = [
            ("network", "cloudNetworks", "DFW", "publicURL"),
            ("compute", "cloudBlockStorage", "DFW", "publicURL"),
            ("volume", "cloudBlockStorage", "LON", "internalURL"),
            ("compute", "cloudServersOpenStack", "SYD", "publicURL"),
            ("object-store", "cloudFiles", "IAD", "privateURL"),
        ]
        for type, name, region, url_type in absent:
            with self.subTest(type = type, name = name, region = region):
                with self.assertRaises(EndpointError) as ctx:
                    find_endpoint(self.catalog, type, name, region, url_type)
                self.assertEqual(
                    str(ctx.exception),
                    f"No endpoints for service type [{type}], name [{name}], "
                    f"region [{region}] and urlType [{url_type}]"
                )
                self.assertEqual(
                    (ctx.exception.type, ctx.exception.name,
                     ctx.exception.region, ctx.exception.url_type),
                    (type, name, region, url_type)
                )

    def test_empty_catalog(self):
        with self.assertRaises(EndpointError):
            find_endpoint(Catalog(), "compute", None, "DFW", "publicURL")


class EndpointTestCase(TestCase):

    def test_factory(self):
        endpoint = Endpoint.factory(
            {"region": "DFW", "publicURL": "https://pub/", "internalURL": "https://int"}
        )
        self.assertEqual(endpoint, Endpoint("https://pub", "https://int", "DFW"))

    def test_factory_missing_urls(self):
        endpoint = Endpoint.factory({"publicURL": "https://pub"}, "ORD")
        self.assertEqual(endpoint, Endpoint("https://pub", None, "ORD"))

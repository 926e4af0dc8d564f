"""
Store Tools — shipping zones, shipping rates, carriers, store settings.

18 tools over /store/*, scoped by altId/altType.
"""

from .base import CapabilityGroup, Endpoint, array, boolean, enum, number, obj, string

_ZONE_FIELDS = {
    "name": string("Zone name"),
    "countries": array("Countries ({code, states})", items="object"),
}

_RATE_FIELDS = {
    "name": string("Rate name"),
    "description": string("Rate description"),
    "currency": string("Currency code"),
    "amount": number("Shipping amount"),
    "conditionType": enum("Condition type", ["none", "price", "weight"]),
    "minCondition": number("Minimum condition value"),
    "maxCondition": number("Maximum condition value"),
    "isCarrierRate": boolean("Use a carrier-calculated rate"),
    "shippingCarrierId": string("Carrier ID"),
    "percentageOfRateFee": number("Percentage markup on carrier rate"),
    "shippingCarrierServices": array("Carrier services", items="object"),
}

_CARRIER_FIELDS = {
    "name": string("Carrier name"),
    "callbackUrl": string("Rate callback URL"),
    "services": array("Services ({name, value})", items="object"),
    "allowsMultipleServiceSelection": boolean("Allow selecting several services"),
}

_PAGING = {
    "limit": number("Maximum results"),
    "offset": number("Results to skip"),
}


class StoreGroup(CapabilityGroup):
    name = "store"

    TOOL_NAMES = (
        "ghl_create_shipping_zone", "ghl_list_shipping_zones", "ghl_get_shipping_zone",
        "ghl_update_shipping_zone", "ghl_delete_shipping_zone",
        "ghl_get_available_shipping_rates", "ghl_create_shipping_rate", "ghl_list_shipping_rates",
        "ghl_get_shipping_rate", "ghl_update_shipping_rate", "ghl_delete_shipping_rate",
        "ghl_create_shipping_carrier", "ghl_list_shipping_carriers", "ghl_get_shipping_carrier",
        "ghl_update_shipping_carrier", "ghl_delete_shipping_carrier",
        "ghl_create_store_setting", "ghl_get_store_setting",
    )

    ENDPOINTS = (
        # Shipping zones
        Endpoint(
            "ghl_create_shipping_zone", "Create a shipping zone",
            "POST", "/store/shipping-zone", _ZONE_FIELDS, required=("name", "countries"), location="alt",
        ),
        Endpoint(
            "ghl_list_shipping_zones", "List shipping zones",
            "GET", "/store/shipping-zone", {**_PAGING, "withShippingRate": boolean("Include rates")}, location="alt",
        ),
        Endpoint(
            "ghl_get_shipping_zone", "Get a shipping zone",
            "GET", "/store/shipping-zone/{shippingZoneId}", {"withShippingRate": boolean("Include rates")}, location="alt",
        ),
        Endpoint(
            "ghl_update_shipping_zone", "Update a shipping zone",
            "PUT", "/store/shipping-zone/{shippingZoneId}", _ZONE_FIELDS, location="alt",
        ),
        Endpoint(
            "ghl_delete_shipping_zone", "Delete a shipping zone",
            "DELETE", "/store/shipping-zone/{shippingZoneId}", location="alt",
        ),

        # Shipping rates
        Endpoint(
            "ghl_get_available_shipping_rates", "Get shipping rates available for an order",
            "POST", "/store/shipping-zone/shipping-rates",
            {
                "country": string("Destination country code"),
                "address": obj("Destination address"),
                "amountAvailable": string("Order amount"),
                "totalOrderAmount": number("Total order amount"),
                "weightAvailable": boolean("Whether weight is known"),
                "totalOrderWeight": number("Total order weight"),
                "source": obj("Order source ({type, subType})"),
                "products": array("Products ({id, quantity})", items="object"),
                "couponCode": string("Coupon code"),
            },
            required=("country", "totalOrderAmount", "totalOrderWeight", "source", "products"), location="alt",
        ),
        Endpoint(
            "ghl_create_shipping_rate", "Create a shipping rate in a zone",
            "POST", "/store/shipping-zone/{shippingZoneId}/shipping-rate", _RATE_FIELDS,
            required=("name", "currency", "amount", "conditionType"), location="alt",
        ),
        Endpoint(
            "ghl_list_shipping_rates", "List shipping rates of a zone",
            "GET", "/store/shipping-zone/{shippingZoneId}/shipping-rate", dict(_PAGING), location="alt",
        ),
        Endpoint(
            "ghl_get_shipping_rate", "Get a shipping rate",
            "GET", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}", location="alt",
        ),
        Endpoint(
            "ghl_update_shipping_rate", "Update a shipping rate",
            "PUT", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}", _RATE_FIELDS, location="alt",
        ),
        Endpoint(
            "ghl_delete_shipping_rate", "Delete a shipping rate",
            "DELETE", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}", location="alt",
        ),

        # Carriers
        Endpoint(
            "ghl_create_shipping_carrier", "Register a shipping carrier",
            "POST", "/store/shipping-carrier", _CARRIER_FIELDS, required=("name", "callbackUrl", "services"), location="alt",
        ),
        Endpoint("ghl_list_shipping_carriers", "List shipping carriers", "GET", "/store/shipping-carrier", location="alt"),
        Endpoint(
            "ghl_get_shipping_carrier", "Get a shipping carrier",
            "GET", "/store/shipping-carrier/{shippingCarrierId}", location="alt",
        ),
        Endpoint(
            "ghl_update_shipping_carrier", "Update a shipping carrier",
            "PUT", "/store/shipping-carrier/{shippingCarrierId}", _CARRIER_FIELDS, location="alt",
        ),
        Endpoint(
            "ghl_delete_shipping_carrier", "Delete a shipping carrier",
            "DELETE", "/store/shipping-carrier/{shippingCarrierId}", location="alt",
        ),

        # Settings
        Endpoint(
            "ghl_create_store_setting", "Create or update store settings",
            "POST", "/store/store-setting",
            {
                "shippingOrigin": obj("Origin address for shipping"),
                "storeOrderNotification": obj("Order notification settings"),
                "storeOrderFulfillmentNotification": obj("Fulfillment notification settings"),
            },
            required=("shippingOrigin",), location="alt",
        ),
        Endpoint("ghl_get_store_setting", "Get store settings", "GET", "/store/store-setting", location="alt"),
    )

"""Payment Tools — orders, transactions, subscriptions, coupons, custom providers."""

from .base import CapabilityGroup, Endpoint, array, boolean, enum, number, obj, string

_LISTING = {
    "limit": number("Maximum results"),
    "offset": number("Results to skip"),
    "startAt": string("Start date (YYYY-MM-DD)"),
    "endAt": string("End date (YYYY-MM-DD)"),
    "search": string("Search term"),
    "contactId": string("Filter by contact"),
    "paymentMode": enum("Payment mode", ["live", "test"]),
}

_COUPON_FIELDS = {
    "name": string("Coupon name"),
    "code": string("Coupon code"),
    "discountType": enum("Discount type", ["percentage", "amount"]),
    "discountValue": number("Discount value"),
    "startDate": string("Start date (ISO 8601)"),
    "endDate": string("End date (ISO 8601)"),
    "usageLimit": number("Maximum redemptions"),
    "productIds": array("Products the coupon applies to"),
    "applyToFuturePayments": boolean("Apply to future recurring payments"),
    "limitPerCustomer": boolean("Limit to one use per customer"),
}


class PaymentGroup(CapabilityGroup):
    name = "payments"

    TOOL_NAMES = (
        "create_whitelabel_integration_provider", "list_whitelabel_integration_providers",
        "list_orders", "get_order_by_id", "create_order_fulfillment", "list_order_fulfillments",
        "list_transactions", "get_transaction_by_id", "list_subscriptions", "get_subscription_by_id",
        "list_coupons", "create_coupon", "update_coupon", "delete_coupon", "get_coupon",
        "create_custom_provider_integration", "delete_custom_provider_integration",
        "get_custom_provider_config", "create_custom_provider_config", "disconnect_custom_provider_config",
    )

    ENDPOINTS = (
        # White-label providers
        Endpoint(
            "create_whitelabel_integration_provider", "Create a white-label payment integration provider",
            "POST", "/payments/integrations/provider/whitelabel",
            {
                "uniqueName": string("Unique provider name (lowercase, hyphenated)"),
                "title": string("Display title"),
                "provider": enum("Underlying provider", ["authorize-net", "nmi"]),
                "description": string("Provider description"),
                "imageUrl": string("Logo URL"),
            },
            required=("uniqueName", "title", "provider", "description", "imageUrl"), location="alt",
        ),
        Endpoint(
            "list_whitelabel_integration_providers", "List white-label payment integration providers",
            "GET", "/payments/integrations/provider/whitelabel",
            {"limit": number("Maximum results"), "offset": number("Results to skip")}, location="alt",
        ),

        # Orders
        Endpoint("list_orders", "List orders", "GET", "/payments/orders", dict(_LISTING), location="alt"),
        Endpoint("get_order_by_id", "Get an order", "GET", "/payments/orders/{orderId}", location="alt"),
        Endpoint(
            "create_order_fulfillment", "Create a fulfillment for an order",
            "POST", "/payments/orders/{orderId}/fulfillments",
            {
                "trackings": array("Tracking entries ({trackingNumber, shippingCarrier, trackingUrl})", items="object"),
                "items": array("Fulfilled items ({priceId, qty})", items="object"),
                "notifyCustomer": boolean("Send the customer a notification"),
            },
            required=("trackings", "items", "notifyCustomer"), location="alt",
        ),
        Endpoint(
            "list_order_fulfillments", "List fulfillments of an order",
            "GET", "/payments/orders/{orderId}/fulfillments", location="alt",
        ),

        # Transactions and subscriptions
        Endpoint(
            "list_transactions", "List transactions",
            "GET", "/payments/transactions",
            {**_LISTING, "subscriptionId": string("Filter by subscription"), "entityId": string("Filter by entity")},
            location="alt",
        ),
        Endpoint(
            "get_transaction_by_id", "Get a transaction",
            "GET", "/payments/transactions/{transactionId}", location="alt",
        ),
        Endpoint(
            "list_subscriptions", "List subscriptions",
            "GET", "/payments/subscriptions",
            {**_LISTING, "entityId": string("Filter by entity"), "id": string("Subscription ID")},
            location="alt",
        ),
        Endpoint(
            "get_subscription_by_id", "Get a subscription",
            "GET", "/payments/subscriptions/{subscriptionId}", location="alt",
        ),

        # Coupons
        Endpoint(
            "list_coupons", "List coupons",
            "GET", "/payments/coupon/list",
            {
                "limit": number("Maximum results"),
                "offset": number("Results to skip"),
                "status": enum("Coupon status", ["scheduled", "active", "expired"]),
                "search": string("Search term"),
            },
            location="alt",
        ),
        Endpoint(
            "create_coupon", "Create a coupon",
            "POST", "/payments/coupon", _COUPON_FIELDS,
            required=("name", "code", "discountType", "discountValue", "startDate"), location="alt",
        ),
        Endpoint(
            "update_coupon", "Update a coupon",
            "PUT", "/payments/coupon", {"id": string("Coupon ID"), **_COUPON_FIELDS},
            required=("id",), location="alt",
        ),
        Endpoint(
            "delete_coupon", "Delete a coupon",
            "DELETE", "/payments/coupon", {"id": string("Coupon ID")},
            required=("id",), location="alt", send_body=True,
        ),
        Endpoint(
            "get_coupon", "Get a coupon by ID or code",
            "GET", "/payments/coupon", {"id": string("Coupon ID"), "code": string("Coupon code")},
            required=("id", "code"), location="alt",
        ),

        # Custom providers
        Endpoint(
            "create_custom_provider_integration", "Create a custom payment provider integration",
            "POST", "/payments/custom-provider/provider",
            {
                "name": string("Provider name"),
                "description": string("Provider description"),
                "paymentsUrl": string("Payment page URL"),
                "queryUrl": string("Query URL"),
                "imageUrl": string("Logo URL"),
            },
            required=("name", "description", "paymentsUrl", "queryUrl", "imageUrl"),
            query=("locationId",), location="query",
        ),
        Endpoint(
            "delete_custom_provider_integration", "Delete the custom payment provider integration",
            "DELETE", "/payments/custom-provider/provider", location="query",
        ),
        Endpoint(
            "get_custom_provider_config", "Get the custom payment provider config",
            "GET", "/payments/custom-provider/connect", location="query",
        ),
        Endpoint(
            "create_custom_provider_config", "Create the custom payment provider config",
            "POST", "/payments/custom-provider/connect",
            {"live": obj("Live keys ({apiKey, publishableKey})"), "test": obj("Test keys ({apiKey, publishableKey})")},
            required=("live", "test"), query=("locationId",), location="query",
        ),
        Endpoint(
            "disconnect_custom_provider_config", "Disconnect the custom payment provider config",
            "POST", "/payments/custom-provider/disconnect",
            {"liveMode": boolean("Disconnect the live config (false for test)")},
            required=("liveMode",), query=("locationId",), location="query",
        ),
    )

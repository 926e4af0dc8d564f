"""Product Tools — products, prices, inventory, collections."""

from .base import CapabilityGroup, Endpoint, array, boolean, enum, number, obj, string

_PRODUCT_FIELDS = {
    "name": string("Product name"),
    "productType": enum("Product type", ["DIGITAL", "PHYSICAL", "SERVICE", "PHYSICAL/DIGITAL"]),
    "description": string("Product description"),
    "image": string("Image URL"),
    "availableInStore": boolean("Listed in the online store"),
    "slug": string("URL slug"),
}

_PAGING = {
    "limit": number("Maximum results"),
    "offset": number("Results to skip"),
    "search": string("Search term"),
}


class ProductGroup(CapabilityGroup):
    name = "products"

    TOOL_NAMES = (
        "ghl_create_product", "ghl_list_products", "ghl_get_product", "ghl_update_product",
        "ghl_delete_product", "ghl_create_price", "ghl_list_prices", "ghl_list_inventory",
        "ghl_create_product_collection", "ghl_list_product_collections",
    )

    ENDPOINTS = (
        Endpoint(
            "ghl_create_product", "Create a product",
            "POST", "/products/", _PRODUCT_FIELDS, required=("name", "productType"), location="body",
        ),
        Endpoint("ghl_list_products", "List products", "GET", "/products/", dict(_PAGING), location="query"),
        Endpoint("ghl_get_product", "Get a product", "GET", "/products/{productId}", location="query"),
        Endpoint(
            "ghl_update_product", "Update a product",
            "PUT", "/products/{productId}", _PRODUCT_FIELDS, location="body",
        ),
        Endpoint("ghl_delete_product", "Delete a product", "DELETE", "/products/{productId}", location="query"),
        Endpoint(
            "ghl_create_price", "Create a price for a product",
            "POST", "/products/{productId}/price",
            {
                "name": string("Price name"),
                "type": enum("Price type", ["one_time", "recurring"]),
                "currency": string("Currency code"),
                "amount": number("Amount"),
                "recurring": obj("Recurring settings ({interval, intervalCount})"),
                "compareAtPrice": number("Compare-at price"),
                "sku": string("SKU"),
                "trackInventory": boolean("Track inventory"),
                "availableQuantity": number("Available quantity"),
            },
            required=("name", "type", "currency", "amount"), location="body",
        ),
        Endpoint(
            "ghl_list_prices", "List prices of a product",
            "GET", "/products/{productId}/price", {"limit": number("Maximum results"), "offset": number("Results to skip")},
            location="query",
        ),
        Endpoint(
            "ghl_list_inventory", "List inventory levels",
            "GET", "/products/inventory", dict(_PAGING), location="alt",
        ),
        Endpoint(
            "ghl_create_product_collection", "Create a product collection",
            "POST", "/products/collections",
            {
                "name": string("Collection name"),
                "slug": string("URL slug"),
                "image": string("Image URL"),
                "seo": obj("SEO settings ({title, description})"),
                "productIds": array("Products in the collection"),
            },
            required=("name", "slug"), location="alt",
        ),
        Endpoint(
            "ghl_list_product_collections", "List product collections",
            "GET", "/products/collections", dict(_PAGING), location="alt",
        ),
    )

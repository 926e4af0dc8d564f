"""
Invoice Tools — templates, schedules, invoices, estimates.

39 tools over /invoices/*, scoped by altId/altType.
"""

from .base import CapabilityGroup, Endpoint, array, boolean, enum, number, obj, string

_DOCUMENT_FIELDS = {
    "name": string("Name"),
    "title": string("Title shown on the document"),
    "currency": string("Currency code"),
    "items": array("Line items ({name, amount, qty, currency})", items="object"),
    "contactDetails": obj("Contact details ({id, name, email, phoneNo})"),
    "businessDetails": obj("Business details"),
    "discount": obj("Discount ({type, value})"),
    "termsNotes": string("Terms and notes"),
    "issueDate": string("Issue date (YYYY-MM-DD)"),
    "dueDate": string("Due date (YYYY-MM-DD)"),
}

_TEMPLATE_FIELDS = {
    "name": string("Template name"),
    "title": string("Title shown on the invoice"),
    "currency": string("Currency code"),
    "items": array("Line items ({name, amount, qty, currency})", items="object"),
    "businessDetails": obj("Business details"),
    "discount": obj("Discount ({type, value})"),
    "termsNotes": string("Terms and notes"),
    "internal": boolean("Internal template"),
}

_ESTIMATE_FIELDS = {
    **_DOCUMENT_FIELDS,
    "expiryDate": string("Expiry date (YYYY-MM-DD)"),
    "estimateNumber": number("Estimate number"),
    "frequencySettings": obj("Frequency settings"),
}

_SCHEDULE_FIELDS = {
    "name": string("Schedule name"),
    "contactDetails": obj("Contact details ({id, name, email, phoneNo})"),
    "schedule": obj("Schedule ({rrule: {intervalType, interval, startDate}})"),
    "liveMode": boolean("Live mode"),
    "businessDetails": obj("Business details"),
    "currency": string("Currency code"),
    "items": array("Line items ({name, amount, qty, currency})", items="object"),
    "discount": obj("Discount ({type, value})"),
    "termsNotes": string("Terms and notes"),
    "title": string("Title shown on generated invoices"),
}

_SEND_FIELDS = {
    "userId": string("User sending the document"),
    "action": enum("Delivery channel", ["sms_and_email", "send_manually", "email", "sms"]),
    "liveMode": boolean("Live mode"),
    "sentFrom": obj("Sender ({fromName, fromEmail})"),
}

_LISTING = {
    "limit": string("Maximum results", default="10"),
    "offset": string("Results to skip", default="0"),
    "search": string("Search term"),
    "status": string("Status filter"),
    "contactId": string("Filter by contact"),
    "startAt": string("Start date (YYYY-MM-DD)"),
    "endAt": string("End date (YYYY-MM-DD)"),
}

_LAST_VISITED = {"invoiceId": string("Invoice ID")}


def _listing(**extra):
    return {**_LISTING, **extra}


class InvoiceGroup(CapabilityGroup):
    name = "invoices"

    TOOL_NAMES = (
        "create_invoice_template", "list_invoice_templates", "get_invoice_template",
        "update_invoice_template", "delete_invoice_template",
        "update_invoice_template_late_fees", "update_invoice_template_payment_methods",
        "create_invoice_schedule", "list_invoice_schedules", "get_invoice_schedule",
        "update_invoice_schedule", "delete_invoice_schedule", "schedule_invoice_schedule",
        "auto_payment_invoice_schedule", "cancel_invoice_schedule",
        "create_invoice", "list_invoices", "get_invoice", "update_invoice", "delete_invoice",
        "void_invoice", "send_invoice", "record_invoice_payment", "generate_invoice_number",
        "text2pay_invoice", "update_invoice_last_visited",
        "create_estimate", "list_estimates", "update_estimate", "delete_estimate", "send_estimate",
        "create_invoice_from_estimate", "generate_estimate_number", "update_estimate_last_visited",
        "list_estimate_templates", "create_estimate_template", "update_estimate_template",
        "delete_estimate_template", "preview_estimate_template",
    )

    ENDPOINTS = (
        # Templates
        Endpoint(
            "create_invoice_template", "Create an invoice template",
            "POST", "/invoices/template", _TEMPLATE_FIELDS, required=("name",), location="alt",
        ),
        Endpoint("list_invoice_templates", "List invoice templates", "GET", "/invoices/template", _listing(), location="alt"),
        Endpoint("get_invoice_template", "Get an invoice template", "GET", "/invoices/template/{templateId}", location="alt"),
        Endpoint(
            "update_invoice_template", "Update an invoice template",
            "PUT", "/invoices/template/{templateId}", _TEMPLATE_FIELDS, location="alt",
        ),
        Endpoint(
            "delete_invoice_template", "Delete an invoice template",
            "DELETE", "/invoices/template/{templateId}", location="alt",
        ),
        Endpoint(
            "update_invoice_template_late_fees", "Update late fee configuration of an invoice template",
            "PATCH", "/invoices/template/{templateId}/late-fees-configuration",
            {"lateFeesConfiguration": obj("Late fee settings ({enable, value, type, frequency, grace})")},
            required=("lateFeesConfiguration",), location="alt",
        ),
        Endpoint(
            "update_invoice_template_payment_methods", "Update payment methods of an invoice template",
            "PATCH", "/invoices/template/{templateId}/payment-methods-configuration",
            {"paymentMethods": obj("Payment method settings")},
            required=("paymentMethods",), location="alt",
        ),

        # Schedules
        Endpoint(
            "create_invoice_schedule", "Create a recurring invoice schedule",
            "POST", "/invoices/schedule", _SCHEDULE_FIELDS,
            required=("name", "contactDetails", "schedule"), location="alt",
        ),
        Endpoint("list_invoice_schedules", "List invoice schedules", "GET", "/invoices/schedule", _listing(), location="alt"),
        Endpoint("get_invoice_schedule", "Get an invoice schedule", "GET", "/invoices/schedule/{scheduleId}", location="alt"),
        Endpoint(
            "update_invoice_schedule", "Update an invoice schedule",
            "PUT", "/invoices/schedule/{scheduleId}", _SCHEDULE_FIELDS, location="alt",
        ),
        Endpoint(
            "delete_invoice_schedule", "Delete an invoice schedule",
            "DELETE", "/invoices/schedule/{scheduleId}", location="alt",
        ),
        Endpoint(
            "schedule_invoice_schedule", "Start an invoice schedule",
            "POST", "/invoices/schedule/{scheduleId}/schedule",
            {"liveMode": boolean("Live mode"), "autoPayment": obj("Auto-payment settings")}, location="alt",
        ),
        Endpoint(
            "auto_payment_invoice_schedule", "Configure auto-payment for an invoice schedule",
            "POST", "/invoices/schedule/{scheduleId}/auto-payment",
            {"id": string("Schedule ID"), "autoPayment": obj("Auto-payment settings ({enable, type, paymentMethodId})")},
            required=("autoPayment",), location="alt",
        ),
        Endpoint(
            "cancel_invoice_schedule", "Cancel an invoice schedule",
            "POST", "/invoices/schedule/{scheduleId}/cancel", location="alt",
        ),

        # Invoices
        Endpoint(
            "create_invoice", "Create an invoice",
            "POST", "/invoices/", _DOCUMENT_FIELDS,
            required=("name", "currency", "items", "contactDetails"), location="alt",
        ),
        Endpoint(
            "list_invoices", "List invoices",
            "GET", "/invoices/", _listing(paymentMode=enum("Payment mode", ["default", "live", "test"])), location="alt",
        ),
        Endpoint("get_invoice", "Get an invoice", "GET", "/invoices/{invoiceId}", location="alt"),
        Endpoint("update_invoice", "Update an invoice", "PUT", "/invoices/{invoiceId}", _DOCUMENT_FIELDS, location="alt"),
        Endpoint("delete_invoice", "Delete an invoice", "DELETE", "/invoices/{invoiceId}", location="alt"),
        Endpoint("void_invoice", "Void an invoice", "POST", "/invoices/{invoiceId}/void", location="alt"),
        Endpoint(
            "send_invoice", "Send an invoice to its contact",
            "POST", "/invoices/{invoiceId}/send", _SEND_FIELDS, required=("userId", "action"), location="alt",
        ),
        Endpoint(
            "record_invoice_payment", "Record a manual payment against an invoice",
            "POST", "/invoices/{invoiceId}/record-payment",
            {
                "mode": enum("Payment mode", ["cash", "card", "cheque", "bank_transfer", "other"]),
                "amount": number("Amount paid"),
                "notes": string("Payment notes"),
                "card": obj("Card details ({brand, last4})"),
                "cheque": obj("Cheque details ({number})"),
            },
            required=("mode",), location="alt",
        ),
        Endpoint(
            "generate_invoice_number", "Generate the next invoice number",
            "GET", "/invoices/generate-invoice-number", location="alt",
        ),
        Endpoint(
            "text2pay_invoice", "Create and send a text-to-pay invoice",
            "POST", "/invoices/text2pay",
            {**_DOCUMENT_FIELDS, "id": string("Existing invoice ID to update"), **_SEND_FIELDS},
            required=("name", "currency", "items", "contactDetails", "action"), location="alt",
        ),
        Endpoint(
            "update_invoice_last_visited", "Mark an invoice as last visited by its contact",
            "PATCH", "/invoices/stats/last-visited-at", _LAST_VISITED, required=("invoiceId",),
        ),

        # Estimates
        Endpoint(
            "create_estimate", "Create an estimate",
            "POST", "/invoices/estimate", _ESTIMATE_FIELDS,
            required=("name", "currency", "items", "contactDetails"), location="alt",
        ),
        Endpoint("list_estimates", "List estimates", "GET", "/invoices/estimate/list", _listing(), location="alt"),
        Endpoint(
            "update_estimate", "Update an estimate",
            "PUT", "/invoices/estimate/{estimateId}", _ESTIMATE_FIELDS, location="alt",
        ),
        Endpoint("delete_estimate", "Delete an estimate", "DELETE", "/invoices/estimate/{estimateId}", location="alt"),
        Endpoint(
            "send_estimate", "Send an estimate to its contact",
            "POST", "/invoices/estimate/{estimateId}/send", _SEND_FIELDS, required=("action",), location="alt",
        ),
        Endpoint(
            "create_invoice_from_estimate", "Convert an estimate into an invoice",
            "POST", "/invoices/estimate/{estimateId}/invoice",
            {"markAsInvoiced": boolean("Mark the estimate as invoiced"), "version": enum("Invoice version", ["v1", "v2"])},
            location="alt",
        ),
        Endpoint(
            "generate_estimate_number", "Generate the next estimate number",
            "GET", "/invoices/estimate/number/generate", location="alt",
        ),
        Endpoint(
            "update_estimate_last_visited", "Mark an estimate as last visited by its contact",
            "PATCH", "/invoices/estimate/stats/last-visited-at",
            {"estimateId": string("Estimate ID")}, required=("estimateId",),
        ),

        # Estimate templates
        Endpoint(
            "list_estimate_templates", "List estimate templates",
            "GET", "/invoices/estimate/template", _listing(), location="alt",
        ),
        Endpoint(
            "create_estimate_template", "Create an estimate template",
            "POST", "/invoices/estimate/template", _ESTIMATE_FIELDS, required=("name",), location="alt",
        ),
        Endpoint(
            "update_estimate_template", "Update an estimate template",
            "PUT", "/invoices/estimate/template/{templateId}", _ESTIMATE_FIELDS, location="alt",
        ),
        Endpoint(
            "delete_estimate_template", "Delete an estimate template",
            "DELETE", "/invoices/estimate/template/{templateId}", location="alt",
        ),
        Endpoint(
            "preview_estimate_template", "Preview an estimate template",
            "GET", "/invoices/estimate/template/preview", {"templateId": string("Template ID")},
            required=("templateId",), location="alt",
        ),
    )

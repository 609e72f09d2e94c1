"""Request bodies for route tests — camelCase, exactly as a client sends them."""


def customer_payload(**overrides) -> dict:
    body = {
        "name": "Ana Souza",
        "email": "ana.souza@mail.com",
        "phone": "+55 11 91234-5678",
        "birthDate": "1990-05-17",
    }
    body.update(overrides)
    return body


def product_payload(**overrides) -> dict:
    body = {
        "title": "Mechanical Keyboard",
        "description": "Tenkeyless, brown switches",
        "slug": "mechanical-keyboard",
        "price": 10,
    }
    body.update(overrides)
    return body

# static demo data: who can log in, and what is for sale

from decimal import Decimal

from shop.models import Product, User

USERS = [
    User(username="devicelab", password="robustest", email="devicelab@robustest.com"),
    User(username="a", password="a", email="test@example.com"),
]

PRODUCTS = [
    Product(
        id="Appium",
        name="Appium",
        price=Decimal("7.50"),
        description="An open-source tool for automating native, mobile web, "
        "and hybrid applications on iOS, Android, and Windows platforms.",
        category="Mobile Testing",
        rating=4.5,
    ),
    Product(
        id="Maestro",
        name="Maestro",
        price=Decimal("5.99"),
        description="The simplest and most effective mobile UI testing framework. "
        "Built for developers and testers.",
        category="Mobile Testing",
        rating=4.8,
    ),
    Product(
        id="Espresso",
        name="Espresso",
        price=Decimal("1.50"),
        description="A testing framework for Android to write concise, beautiful, "
        "and reliable Android UI tests.",
        category="Android Testing",
        rating=4.3,
    ),
    Product(
        id="Selenium",
        name="Selenium",
        price=Decimal("2.30"),
        description="A portable framework for testing web applications. "
        "It provides a playback tool for authoring functional tests.",
        category="Web Testing",
        rating=4.1,
    ),
    Product(
        id="Cypress",
        name="Cypress",
        price=Decimal("8.10"),
        description="A next-generation front-end testing tool built for the modern web. "
        "It addresses the key pain points developers and QA engineers face.",
        category="Web Testing",
        rating=4.7,
    ),
    Product(
        id="Playwright",
        name="Playwright",
        price=Decimal("9.00"),
        description="A Node.js library to automate Chromium, Firefox and WebKit "
        "with a single API. Developed by Microsoft.",
        category="Web Testing",
        rating=4.6,
        in_stock=False,
    ),
    Product(
        id="XCUITest",
        name="XCUITest",
        price=Decimal("1.50"),
        description="Apple's UI testing framework for iOS. It's integrated into Xcode "
        "and allows for testing of the user interface.",
        category="iOS Testing",
        rating=4.2,
    ),
    Product(
        id="Jest",
        name="Jest",
        price=Decimal("4.75"),
        description="A delightful JavaScript Testing Framework with a focus on simplicity. "
        "It works with projects using: Babel, TypeScript, Node, React, Angular, Vue and more.",
        category="Unit Testing",
        rating=4.4,
    ),
    Product(
        id="Mocha",
        name="Mocha",
        price=Decimal("3.25"),
        description="A feature-rich JavaScript test framework running on Node.js and in "
        "the browser, making asynchronous testing simple and fun.",
        category="Unit Testing",
        rating=4.0,
    ),
    Product(
        id="Pytest",
        name="Pytest",
        price=Decimal("6.80"),
        description="A framework that makes it easy to write small, readable tests, "
        "and can scale to support complex functional testing.",
        category="Python Testing",
        rating=4.5,
    ),
    Product(
        id="TestNG",
        name="TestNG",
        price=Decimal("4.20"),
        description="A testing framework inspired from JUnit and NUnit but introducing "
        "some new functionalities that make it more powerful and easier to use.",
        category="Java Testing",
        rating=4.1,
    ),
]

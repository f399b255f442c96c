"""Realistic Apollo response payloads used across the tool tests."""

PERSON_SEARCH_RESPONSE = {
    "breadcrumbs": [],
    "partial_results_only": False,
    "pagination": {"page": 1, "per_page": 10, "total_entries": 145, "total_pages": 15},
    "people": [
        {
            "id": "5f7b1234567890abcdef1234",
            "first_name": "John",
            "last_name": "Doe",
            "name": "John Doe",
            "title": "Software Engineer",
            "email": "john.doe@example.com",
            "email_status": "verified",
            "linkedin_url": "https://linkedin.com/in/johndoe",
            "formatted_address": "San Francisco, California, United States",
            "seniority": "senior",
            "organization": {
                "id": "5f7b9876543210fedcba9876",
                "name": "Example Corp",
                "website_url": "https://example.com",
            },
        },
        {
            "id": "5f7b1234567890abcdef5678",
            "name": "Jane Roe",
            "title": "CTO",
            "organization": None,
        },
    ],
}

COMPANY_SEARCH_RESPONSE = {
    "breadcrumbs": [],
    "pagination": {"page": 2, "per_page": 10, "total_entries": 52, "total_pages": 6},
    "accounts": [{"id": "acct-1", "name": "Saved Account"}],
    "organizations": [
        {
            "id": "5f7b9876543210fedcba9876",
            "name": "Example Corp",
            "website_url": "https://example.com",
            "linkedin_url": "https://linkedin.com/company/example-corp",
            "founded_year": 2010,
            "industry": "Computer Software",
            "employee_count": 250,
            "raw_address": "123 Main St, San Francisco, CA 94105",
            "city": "San Francisco",
            "state": "California",
            "country": "United States",
            "phone": "+1 415-555-0100",
            "organization_revenue_printed": "50M",
            "market_cap": None,
            "keywords": ["saas", "b2b"],
            "logo_url": "https://example.com/logo.png",
        },
        {
            "id": "5f7b9876543210fedcba0000",
            "name": "Another Co",
            "city": "Austin",
            "country": "United States",
        },
    ],
}

COMPANY_SUMMARY_FIELDS = {
    "id",
    "name",
    "website",
    "industry",
    "employee_count",
    "location",
    "linkedin_url",
    "founded_year",
    "phone",
    "revenue",
    "market_cap",
}

# each scenario: steps as (operation, caller, args), then the expected final result
SCENARIOS = {
    "issue": {
        "steps": [
            ("register_institution", "contract-owner", ("university1",)),
            ("issue_credential", "university1", ("student1", "hash123")),
        ],
        "expect": {"ok": True, "value": 1},
    },
    "revoked": {
        "steps": [
            ("register_institution", "contract-owner", ("university1",)),
            ("issue_credential", "university1", ("student1", "hash123")),
            ("revoke_credential", "university1", (1,)),
            ("verify_credential", None, (1, "hash123")),
        ],
        "expect": {"ok": True, "value": False},
    },
    "disclosure": {
        "steps": [
            ("register_institution", "contract-owner", ("university1",)),
            ("issue_credential", "university1", ("student1", "hash123")),
            ("add_selective_disclosure", "student1", (1, "gpa", "3.8")),
            ("add_selective_disclosure", "student2", (1, "gpa", "3.9")),
        ],
        "expect": {"ok": False, "value": 103},
    },
    "unregistered_issuer": {
        "steps": [
            ("issue_credential", "unregistered-university", ("student1", "hash123")),
        ],
        "expect": {"ok": False, "value": 103},
    },
    "unknown_id": {
        "steps": [
            ("verify_credential", None, (42, "hash123")),
        ],
        "expect": {"ok": False, "value": 101},
    },
}

from comply import define_policies, define_policy, check, assert_, check_all_settle, or_, PolicyRejection
from comply.logging_config import setup_logging

setup_logging(level="DEBUG", json_format=False)

print("--- comply Live Demo ---")

# 1. Context shared by every policy set
context = {"user_id": "alice", "roles_by_org": {"it-department": "admin", "sales-team": "user"}}
print(f"[+] Context: {context['user_id']}")

# 2. Policy sets
post_policies = define_policies(lambda ctx: [
    define_policy("my post", lambda post: post["user_id"] == ctx["user_id"], "Not the author"),
    define_policy("can read", lambda post: or_(
        lambda: post["user_id"] == ctx["user_id"],
        lambda: post["status"] == "published",
    )),
])
org_policies = define_policies(lambda ctx: lambda org_id: [
    define_policy("can administrate org", lambda: ctx["roles_by_org"].get(org_id) == "admin"),
])

guard = {
    "post": post_policies(context),
    "org": org_policies(context),
}
print(f"[+] Post policies: {guard['post'].names()}")

# 3. Checks
draft = {"user_id": "bob", "status": "draft"}
print(f"[+] can read bob's draft: {check(guard['post'].policy('can read'), draft)}")
for org_id in ("it-department", "sales-team"):
    allowed = check(guard["org"](org_id).policy("can administrate org"))
    print(f"[+] can administrate {org_id}: {allowed}")

# 4. Assertion
try:
    assert_(guard["post"].policy("my post"), draft)
except PolicyRejection as e:
    print(f"[-] {e.name}: {e}")

# 5. Snapshot
snapshot = check_all_settle([
    (guard["post"].policy("can read"), draft),
    (guard["org"]("it-department").policy("can administrate org"),),
])
print(f"[+] Snapshot: {snapshot}")
print("--- Demo Complete ---")

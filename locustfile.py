from locust import HttpUser, task, between
import random

# Small wallet pool so burst and history rules fire under load
wallets = [f"0x{n:04X}" for n in range(50)]
procedures = ["", "QxAddToBidOrder", "TransferShareOwnershipAndPossession", "IssueAsset", "QxTransfer"]


class QubicFraudUser(HttpUser):
    wait_time = between(1, 2)

    def on_start(self):
        self.tick = random.randint(10_000, 20_000)

    @task(5)
    def post_transaction(self):
        self.tick += random.randint(1, 6)
        self.client.post(
            "/api/transactions",
            json={
                "data": {
                    "amount": random.choice([500, 15_000, 60_000, 250_000, 1_500_000]),
                    "source": random.choice(wallets),
                    "dest": random.choice(wallets),
                    "tick": self.tick,
                    "procedure": random.choice(procedures),
                }
            },
        )

    @task(2)
    def summary(self):
        self.client.get("/api/summary")

    @task(1)
    def wallet_profile(self):
        with self.client.get(
            f"/api/wallet/{random.choice(wallets)}",
            name="/api/wallet/[id]",
            catch_response=True,
        ) as resp:
            # wallet not referenced yet
            if resp.status_code == 404:
                resp.success()

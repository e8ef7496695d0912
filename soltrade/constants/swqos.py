"""Tip accounts and regional endpoints of the transaction-landing services."""

from soltrade.pubkey import Pubkey


def _keys(text: str) -> tuple[Pubkey, ...]:
    return tuple(Pubkey.from_string(word) for word in text.split())


def _regional(template: str, hosts: str) -> tuple[str, ...]:
    return tuple(template.format(host) for host in hosts.split())


JITO_TIP_ACCOUNTS = _keys(
    """
    96gYZGLnJYVFmbjzopPSU6QiEV5fGqZNyN9nmNhvrZU5 HFqU5x63VTqvQss8hp11i4wVV8bD44PvwucfZ2bU7gRe
    Cw8CFyM9FkoMi7K7Crf6HNQqf4uEMzpKw6QNghXLvLkY ADaUMid9yfUytqMBgopwjb2DTLSokTSzL1zt6iGPaS49
    DfXygSm4jCyNCybVYYK6DwvWqjKee8pbDmJGcLWNDXjh ADuUkR4vqLUMWXxW9gh6D6L8pMSawimctcNZ5pGwDcEt
    DttWaMuVvTiduZRnguLF7jNxTgiMBZ1hyAumKUiL2KRL 3AVi9Tg9Uo68tJfuvoKvqKNWKkC5wPdSSdeBnizKZ6jT
    """
)

NEXTBLOCK_TIP_ACCOUNTS = _keys(
    """
    NextbLoCkVtMGcV47JzewQdvBpLqT9TxQFozQkN98pE NexTbLoCkWykbLuB1NkjXgFWkX9oAtcoagQegygXXA2
    NeXTBLoCKs9F1y5PJS9CKrFNNLU1keHW71rfh7KgA1X NexTBLockJYZ7QD7p2byrUa6df8ndV2WSd8GkbWqfbb
    neXtBLock1LeC67jYd1QdAa32kbVeubsfPNTJC1V5At nEXTBLockYgngeRmRrjDV31mGSekVPqZoMGhQEZtPVG
    NEXTbLoCkB51HpLBLojQfpyVAMorm3zzKg7w9NFdqid nextBLoCkPMgmG8ZgJtABeScP35qLa2AMCNKntAP7Xc
    """
)

ZEROSLOT_TIP_ACCOUNTS = _keys(
    """
    Eb2KpSC8uMt9GmzyAEm5Eb1AAAgTjRaXWFjKyFXHZxF3 FCjUJZ1qozm1e8romw216qyfQMaaWKxWsuySnumVCCNe
    ENxTEjSQ1YabmUpXAdCgevnHQ9MHdLv8tzFiuiYJqa13 6rYLG55Q9RpsPGvqdPNJs4z5WTxJVatMB8zV3WJhs5EK
    Cix2bHfqPcKcM233mzxbLk14kSggUUiz2A87fJtGivXr
    """
)

NOZOMI_TIP_ACCOUNTS = _keys(
    """
    TEMPaMeCRFAS9EKF53Jd6KpHxgL47uWLcpFArU1Fanq noz3jAjPiHuBPqiSPkkugaJDkJscPuRhYnSpbi8UvC4
    noz3str9KXfpKknefHji8L1mPgimezaiUyCHYMDv1GE noz6uoYCDijhu1V7cutCpwxNiSovEwLdRHPwmgCGDNo
    noz9EPNcT7WH6Sou3sr3GGjHQYVkN3DNirpbvDkv9YJ nozc5yT15LazbLTFVZzoNZCwjh3yUtW86LoUyqsBu4L
    nozFrhfnNGoyqwVuwPAW4aaGqempx4PU6g6D9CJMv7Z nozievPk7HyK1Rqy1MPJwVQ7qQg2QoJGyP71oeDwbsu
    noznbgwYnBLDHu8wcQVCEw6kDrXkPdKkydGJGNXGvL7 nozNVWs5N8mgzuD3qigrCG2UoKxZttxzZ85pvAQVrbP
    nozpEGbwx4BcGp6pvEdAh1JoC2CQGZdU6HbNP1v2p6P nozrhjhkCr3zXT3BiT4WCodYCUFeQvcdUkM7MqhKqge
    nozrwQtWhEdrA6W8dkbt9gnUaMs52PdAv5byipnadq3 nozUacTVWub3cL4mJmGCYjKZTnE9RbdY5AP46iQgbPJ
    nozWCyTPppJjRuw2fpzDhhWbW355fzosWSzrrMYB1Qk nozWNju6dY353eMkMqURqwQEoM3SFgEKC6psLCSfUne
    nozxNBgWohjR75vdspfxR5H9ceC7XXH99xpxhVGt3Bb
    """
)

BLOX_TIP_ACCOUNTS = _keys(
    """
    HWEoBxYs7ssKuudEjzjmpfJVX7Dvi7wescFsVx2L5yoY 95cfoy472fcQHaw4tPGBTKpn6ZQnfEPfBgDQx6gcRmRg
    3UQUKjhMKaY2S6bjcQD6yHB7utcZt5bfarRCmctpRtUd FogxVNs6Mm2w9rnGL1vkARSwJxvLE8mujTv3LK8RnUhF
    """
)

NODE1_TIP_ACCOUNTS = _keys(
    """
    node1PqAa3BWWzUnTHVbw8NJHC874zn9ngAkXjgWEej node1UzzTxAAeBTpfZkQPJXBAqixsbdth11ba1NXLBG
    node1Qm1bV4fwYnCurP8otJ9s5yrkPq7SPZ5uhj3Tsv node1PUber6SFmSQgvf2ECmXsHP5o3boRSGhvJyPMX1
    node1AyMbeqiVN6eoQzEAwCA6Pk826hrdqdAHR7cdJ3 node1YtWCoTwwVYTFLfS19zquRQzYX332hs1HEuRBjC
    """
)

FLASHBLOCK_TIP_ACCOUNTS = _keys(
    """
    FLaShB3iXXTWE1vu9wQsChUKq3HFtpMAhb8kAh1pf1wi FLashhsorBmM9dLpuq6qATawcpqk1Y2aqaZfkd48iT3W
    FLaSHJNm5dWYzEgnHJWWJP5ccu128Mu61NJLxUf7mUXU FLaSHR4Vv7sttd6TyDF4yR1bJyAxRwWKbohDytEMu3wL
    FLASHRzANfcAKDuQ3RXv9hbkBy4WVEKDzoAgxJ56DiE4 FLasHstqx11M8W56zrSEqkCyhMCCpr6ze6Mjdvqope5s
    FLAShWTjcweNT4NSotpjpxAkwxUr2we3eXQGhpTVzRwy FLasHXTqrbNvpWFB6grN47HGZfK6pze9HLNTgbukfPSk
    FLAshyAyBcKb39KPxSzXcepiS8iDYUhDGwJcJDPX4g2B FLAsHZTRcf3Dy1APaz6j74ebdMC6Xx4g6i9YxjyrDybR
    """
)

# Endpoint tables are indexed by region, in this order:
# NewYork, Frankfurt, Amsterdam, SLC, Tokyo, London, LosAngeles, Default.

SWQOS_ENDPOINTS_JITO = (
    *_regional(
        "https://{}.mainnet.block-engine.jito.wtf",
        "ny frankfurt amsterdam slc tokyo london ny",
    ),
    "https://mainnet.block-engine.jito.wtf",
)

SWQOS_ENDPOINTS_NEXTBLOCK = _regional(
    "http://{}.nextblock.io", "ny fra fra slc tokyo london ny fra"
)

SWQOS_ENDPOINTS_ZERO_SLOT = _regional(
    "http://{}.0slot.trade", "ny de ams ny jp ams la de"
)

SWQOS_ENDPOINTS_TEMPORAL = _regional(
    "http://{}.nozomi.temporal.xyz", "ewr1 fra2 ams1 ewr1 tyo1 sgp1 pit1 fra2"
)

SWQOS_ENDPOINTS_BLOX = _regional(
    "https://{}.solana.dex.blxrbdn.com",
    "ny germany amsterdam ny tokyo uk la germany",
)

SWQOS_ENDPOINTS_NODE1 = _regional(
    "http://{}.node1.me", "ny fra ams ny fra ams ny fra"
)

SWQOS_ENDPOINTS_FLASHBLOCK = _regional(
    "http://{}.flashblock.trade", "ny fra ams slc singapore london ny ny"
)
"""OpenZeppelin IERC721Errors and IERC1155Errors (draft-IERC6093).

Collection positions on v1.8+ are token-backed, so these reverts can bubble
up through market and factory calls.
"""

from __future__ import annotations

from rheo_sdk.core.constants.errors_abi import error_fragment

ERC721_ERRORS_ABI = [
    error_fragment("ERC721InvalidOwner", ("owner", "address")),
    error_fragment("ERC721NonexistentToken", ("tokenId", "uint256")),
    error_fragment(
        "ERC721IncorrectOwner",
        ("sender", "address"),
        ("tokenId", "uint256"),
        ("owner", "address"),
    ),
    error_fragment("ERC721InvalidSender", ("sender", "address")),
    error_fragment("ERC721InvalidReceiver", ("receiver", "address")),
    error_fragment(
        "ERC721InsufficientApproval", ("operator", "address"), ("tokenId", "uint256")
    ),
    error_fragment("ERC721InvalidApprover", ("approver", "address")),
    error_fragment("ERC721InvalidOperator", ("operator", "address")),
]

ERC1155_ERRORS_ABI = [
    error_fragment(
        "ERC1155InsufficientBalance",
        ("sender", "address"),
        ("balance", "uint256"),
        ("needed", "uint256"),
        ("tokenId", "uint256"),
    ),
    error_fragment("ERC1155InvalidSender", ("sender", "address")),
    error_fragment("ERC1155InvalidReceiver", ("receiver", "address")),
    error_fragment(
        "ERC1155MissingApprovalForAll", ("operator", "address"), ("owner", "address")
    ),
    error_fragment("ERC1155InvalidApprover", ("approver", "address")),
    error_fragment("ERC1155InvalidOperator", ("operator", "address")),
    error_fragment(
        "ERC1155InvalidArrayLength",
        ("idsLength", "uint256"),
        ("valuesLength", "uint256"),
    ),
]

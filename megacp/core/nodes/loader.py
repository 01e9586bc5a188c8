"""Builds a Filesystem from the API's node list (``a: f``)."""
from typing import Dict, Any, List, Optional

from .decryptor import KeyDecryptor
from .filesystem import Filesystem
from .models import Node, NodeType
from ..attributes import AttributesPacker
from ..crypto import KeyManager
from ..logging import get_logger

logger = get_logger(__name__)


class FilesystemLoader:
    """
    Decrypts an ``a: f`` response into a Filesystem.
    
    Resulting layout:
    
        /                  TOP
        /Root              ROOT (Cloud Drive)
        /Inbox             INBOX
        /Rubbish           RUBBISH
        /Contacts          NETWORK
        /Contacts/<email>  CONTACT, holding folders shared by that contact
    
    Nodes whose key or attributes can't be decrypted are left out, so every
    FILE or FOLDER in the result carries ``key_full``.
    """
    
    TOP_HANDLE = '*TOP*'
    NETWORK_HANDLE = '*NETWORK*'
    
    SPECIAL_NAMES = {
        NodeType.ROOT: 'Root',
        NodeType.INBOX: 'Inbox',
        NodeType.RUBBISH: 'Rubbish',
    }
    
    def __init__(self, master_key: bytes, user_id: Optional[str] = None):
        self._user_id = user_id
        self._decryptor = KeyDecryptor(master_key, user_id)
    
    @property
    def share_keys(self) -> Dict[str, bytes]:
        return self._decryptor.share_keys
    
    def load(self, response: Dict[str, Any]) -> Filesystem:
        nodes_data = response.get('f') or []
        logger.debug(f"Loading {len(nodes_data)} nodes")
        
        fs = Filesystem()
        fs.add(Node(handle=self.TOP_HANDLE, type=NodeType.TOP, name=''))
        fs.add(Node(handle=self.NETWORK_HANDLE, type=NodeType.NETWORK,
                    name='Contacts', parent=self.TOP_HANDLE))
        
        self._load_share_keys(response)
        contacts = self._load_contacts(response, fs)
        
        known = {data.get('h') for data in nodes_data if data.get('h')}
        
        for data in nodes_data:
            node = self._create_node(data)
            if node is None:
                continue
            
            if node.type in self.SPECIAL_NAMES:
                node.parent = self.TOP_HANDLE
            elif node.parent not in known and data.get('su'):
                node.parent = self._contact_for(data['su'], contacts, fs).handle
            
            fs.add(node)
        
        logger.debug(f"Filesystem ready with {len(fs)} nodes")
        return fs
    
    def _load_share_keys(self, response: Dict[str, Any]) -> None:
        for share in response.get('ok') or []:
            handle, ha, k = share.get('h'), share.get('ha'), share.get('k')
            if not handle or not ha or not k:
                logger.warning(f"Incomplete share key entry: {share}")
                continue
            self._decryptor.add_share(handle, ha, k)
        
        # Owned shares also carry their key on the node itself
        for data in response.get('f') or []:
            sk = data.get('sk')
            if data.get('h') and sk and data.get('u') == self._user_id:
                share_key = self._decryptor.decrypt_master_wrapped(sk)
                if share_key:
                    self._decryptor.add_share_key(data['h'], share_key)
    
    def _load_contacts(self, response: Dict[str, Any], fs: Filesystem) -> Dict[str, Node]:
        contacts = {}
        for user in response.get('u') or []:
            handle = user.get('u')
            if not handle or handle == self._user_id or user.get('c') != 1:
                continue
            contact = Node(
                handle=handle,
                type=NodeType.CONTACT,
                name=user.get('m') or handle,
                parent=self.NETWORK_HANDLE,
            )
            fs.add(contact)
            contacts[handle] = contact
        return contacts
    
    def _contact_for(self, user_handle: str, contacts: Dict[str, Node], fs: Filesystem) -> Node:
        if user_handle not in contacts:
            contact = Node(
                handle=user_handle,
                type=NodeType.CONTACT,
                name=user_handle,
                parent=self.NETWORK_HANDLE,
            )
            fs.add(contact)
            contacts[user_handle] = contact
        return contacts[user_handle]
    
    def _create_node(self, data: Dict[str, Any]) -> Optional[Node]:
        handle = data.get('h')
        try:
            node_type = NodeType(data.get('t'))
        except ValueError:
            logger.debug(f"Unknown node type {data.get('t')!r} for {handle}, skipping")
            return None
        
        if not handle:
            return None
        
        if node_type in self.SPECIAL_NAMES:
            return Node(handle=handle, type=node_type, name=self.SPECIAL_NAMES[node_type],
                        mtime=data.get('ts', 0))
        
        if node_type not in (NodeType.FILE, NodeType.FOLDER):
            return None
        
        key_full = self._decryptor.decrypt_node_key(data.get('k', ''))
        expected = KeyManager.FILE_KEY_SIZE if node_type == NodeType.FILE else KeyManager.FOLDER_KEY_SIZE
        if key_full is None or len(key_full) != expected:
            logger.debug(f"Can't decrypt key of {handle}, skipping")
            return None
        
        try:
            attrs = AttributesPacker.unpack_b64(data.get('a', ''), key_full)
        except ValueError as e:
            logger.debug(f"Can't decrypt attributes of {handle}: {e}, skipping")
            return None
        
        name = attrs.get('n')
        if not name or '/' in name:
            logger.debug(f"Invalid name for {handle}, skipping")
            return None
        
        return Node(
            handle=handle,
            type=node_type,
            name=name,
            parent=data.get('p'),
            a=data.get('a'),
            key=data.get('k'),
            key_full=key_full,
            attrs=attrs,
            size=data.get('s', 0),
            mtime=data.get('ts', 0),
        )
